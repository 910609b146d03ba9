"""
Reference Resolver（非网络）。

根据事件类型得到 base/head，并构造 compare API 的 basehead 表达式：
  [owner:]base...[owner:]head

fork 来的 PR 需要带 owner 前缀（GitHub compare 的 "cross-repository" 写法），
同仓库 PR 和 push 事件不带前缀。
"""

from __future__ import annotations

import logging

from changed_files.errors import UnresolvedReferenceError
from changed_files.errors import UnsupportedEventError
from changed_files.pipeline.models import CompareRequest
from changed_files.pipeline.models import OtherTrigger
from changed_files.pipeline.models import PullRequestTrigger
from changed_files.pipeline.models import PushTrigger
from changed_files.pipeline.models import RepositoryCoordinate
from changed_files.pipeline.models import TriggerEvent

logger = logging.getLogger(__name__)


def _is_fork(head_owner: str, head_repo_name: str, repo: RepositoryCoordinate) -> bool:
    # 仓库名比较不做 login/name 回退
    return head_owner.lower() != repo.owner.lower() or head_repo_name.lower() != repo.name.lower()


def resolve_compare_request(event: TriggerEvent, repo: RepositoryCoordinate) -> CompareRequest:
    """
    - PullRequestTrigger：base.ref / head.ref，fork 时加 owner 前缀
    - PushTrigger：before / after，永远不加前缀
    - OtherTrigger：直接抛 UnsupportedEventError
    """
    base_prefix = ""
    head_prefix = ""
    if isinstance(event, OtherTrigger):
        raise UnsupportedEventError(event.event_name)
    if isinstance(event, PullRequestTrigger):
        event_name = event.kind
        base = event.base_ref
        head = event.head_ref
        # 只在 login 缺失时退回 name；空字符串的 login 视为找不到 owner
        head_owner = event.head_owner_login if event.head_owner_login is not None else event.head_owner_name
        if not head_owner:
            raise UnresolvedReferenceError(
                f"This action could not find the owner name of the head {head}. "
                "Please submit an issue on this action's GitHub repo if you believe this in correct."
            )
        if _is_fork(head_owner=head_owner, head_repo_name=event.head_repo_name, repo=repo):
            head_prefix = f"{head_owner}:"
            base_prefix = f"{repo.owner}:"
    elif isinstance(event, PushTrigger):
        event_name = event.kind
        base = event.before
        head = event.after
    else:
        raise TypeError(f"Unknown trigger event: {event!r}")

    logger.info(f"Base commit: {base}")
    logger.info(f"Head commit: {head}")

    if not base or not head:
        raise UnresolvedReferenceError(
            f"The base and head commits are missing from the payload for this {event_name} event. "
            "Please submit an issue on this action's GitHub repo."
        )

    return CompareRequest(
        owner=repo.owner,
        repo=repo.name,
        basehead=f"{base_prefix}{base}...{head_prefix}{head}",
    )
