"""
GitHub event payload / API response schemas（Pydantic）。

说明：
- 字段只覆盖当前需要的子集（pull_request / push payload + compare API）
- ref/sha 等字段都允许缺失：缺失时由 resolver 给出明确的错误，而不是 schema 校验错误
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GitHubOwner(BaseModel):
    login: str | None = None
    name: str | None = None


class GitHubRepository(BaseModel):
    name: str
    owner: GitHubOwner


class GitHubPullRequestHead(BaseModel):
    ref: str | None = None
    sha: str | None = None
    repo: GitHubRepository


class GitHubPullRequestBase(BaseModel):
    ref: str | None = None
    sha: str | None = None


class GitHubPullRequest(BaseModel):
    base: GitHubPullRequestBase = Field(default_factory=GitHubPullRequestBase)
    head: GitHubPullRequestHead


class GitHubPullRequestEvent(BaseModel):
    """`pull_request` 事件 payload（最小结构）。"""

    pull_request: GitHubPullRequest


class GitHubPushEvent(BaseModel):
    """`push` 事件 payload：before/after 是 commit sha。"""

    before: str | None = None
    after: str | None = None


class GitHubCompareFile(BaseModel):
    """
    compare 结果中的文件 item。

    status 用 str 而不是 Literal：GitHub 还会返回 copied/changed/unchanged，
    这些值需要走 classifier 的明确报错路径。
    """

    filename: str
    status: str


class GitHubComparison(BaseModel):
    """GET /repos/{owner}/{repo}/compare/{basehead} 返回结构（子集）。"""

    status: str | None = None
    ahead_by: int | None = None
    behind_by: int | None = None
    total_commits: int | None = None
    files: list[GitHubCompareFile] | None = None


class GitHubCompareResponse(BaseModel):
    """compare 调用结果：HTTP status code + body（非 200 时 body 为空结构）。"""

    status_code: int
    data: GitHubComparison = Field(default_factory=GitHubComparison)
