"""
GitHub -> pipeline domain adapter。

职责：
- 把 event name + 原始 payload 转为封闭的 `TriggerEvent` 变体（只在这里判断一次事件名）
- 把 compare API 的文件列表转为 `ChangedFile`
"""

from __future__ import annotations

from collections.abc import Mapping

from changed_files.github.schemas import GitHubCompareFile
from changed_files.github.schemas import GitHubPullRequestEvent
from changed_files.github.schemas import GitHubPushEvent
from changed_files.pipeline.models import ChangedFile
from changed_files.pipeline.models import OtherTrigger
from changed_files.pipeline.models import PullRequestTrigger
from changed_files.pipeline.models import PushTrigger
from changed_files.pipeline.models import TriggerEvent


def build_trigger_event(event_name: str, payload: Mapping[str, object]) -> TriggerEvent:
    """
    pull_request / push 之外的事件直接返回 OtherTrigger（不解析 payload）。

    payload 结构不符合 schema 时抛 pydantic ValidationError。
    """
    if event_name == "pull_request":
        event = GitHubPullRequestEvent.model_validate(payload)
        head = event.pull_request.head
        return PullRequestTrigger(
            base_ref=event.pull_request.base.ref,
            head_ref=head.ref,
            head_owner_login=head.repo.owner.login,
            head_owner_name=head.repo.owner.name,
            head_repo_name=head.repo.name,
        )
    if event_name == "push":
        push = GitHubPushEvent.model_validate(payload)
        return PushTrigger(before=push.before, after=push.after)
    return OtherTrigger(event_name=event_name)


def build_changed_files(files: list[GitHubCompareFile] | None) -> list[ChangedFile]:
    return [ChangedFile(filename=f.filename, status=f.status) for f in files or []]
