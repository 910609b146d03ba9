"""
Pipeline 领域模型（Pydantic）。

用途：
- 明确各阶段输入/输出的数据结构（event -> compare request -> files -> result）
- 与 GitHub payload 解耦：GitHub schema 的转换在 `github/adapter.py` 中完成
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class OutputFormat(str, Enum):
    SPACE_DELIMITED = "space-delimited"
    CSV = "csv"
    JSON = "json"


class FileStatus(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"


class RepositoryCoordinate(BaseModel):
    """当前 action 运行所在的仓库（来自 GITHUB_REPOSITORY）。"""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str


class PullRequestTrigger(BaseModel):
    """
    pull_request 事件。

    head_owner_login / head_owner_name：fork 判断时优先用 login，缺失再退回 name。
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["pull_request"] = "pull_request"
    base_ref: str | None = None
    head_ref: str | None = None
    head_owner_login: str | None = None
    head_owner_name: str | None = None
    head_repo_name: str


class PushTrigger(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["push"] = "push"
    before: str | None = None
    after: str | None = None


class OtherTrigger(BaseModel):
    """不支持的事件类型，只保留事件名用于报错。"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"
    event_name: str


TriggerEvent = Union[PullRequestTrigger, PushTrigger, OtherTrigger]


class CompareRequest(BaseModel):
    """GitHub compare API 的请求参数（只取第一页，最多 250 个文件）。"""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    basehead: str
    per_page: int = 250
    page: int = 1


class ChangedFile(BaseModel):
    """compare 结果中的单个文件。status 保持原始字符串，交给 classifier 校验。"""

    filename: str
    status: str


class ClassificationResult(BaseModel):
    """classifier 的输出：六个按出现顺序排列的文件序列（只读）。"""

    model_config = ConfigDict(frozen=True)

    all: tuple[str, ...] = Field(default_factory=tuple)
    added: tuple[str, ...] = Field(default_factory=tuple)
    modified: tuple[str, ...] = Field(default_factory=tuple)
    removed: tuple[str, ...] = Field(default_factory=tuple)
    renamed: tuple[str, ...] = Field(default_factory=tuple)
    added_modified: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def deleted(self) -> tuple[str, ...]:
        # 向后兼容旧版 output 名称
        return self.removed


class RunOptions(BaseModel):
    """
    action 输入。

    - format：不在这里做枚举校验，交给 validate_format 产出固定的错误信息
    - filter：逗号分隔的 glob 列表
    """

    format: str
    filter: str | None = None


class ActionContext(BaseModel):
    """一次运行的执行上下文（事件名 + 原始 payload + 当前仓库）。"""

    event_name: str
    payload: dict[str, object] = Field(default_factory=dict)
    repo: RepositoryCoordinate
