"""
GitHub API 客户端（外部系统连接器）。

约定：
- 这里只做 HTTP 调用 + schema 校验
- 非 200 的 status code 原样返回，由 pipeline 的 gateway 判断并报错
- 网络错误直接抛出（不要吞），由 orchestrator 统一上报
"""

from __future__ import annotations

from typing import Protocol
from urllib.parse import quote

import httpx

from changed_files.github.schemas import GitHubComparison
from changed_files.github.schemas import GitHubCompareResponse


class CommitComparer(Protocol):
    """比较两个 commit 的能力（GitHubClient 或测试里的 fake）。"""

    async def compare_commits(
        self,
        owner: str,
        repo: str,
        basehead: str,
        per_page: int,
        page: int,
    ) -> GitHubCompareResponse: ...


class GitHubClient:
    """最小 GitHub API client（只支持 compare two commits）。"""

    def __init__(self, api_base_url: str, token: str, http_client: httpx.AsyncClient) -> None:
        self._api_base_url = api_base_url.rstrip("/")
        self._token = token
        self._http_client = http_client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def compare_commits(
        self,
        owner: str,
        repo: str,
        basehead: str,
        per_page: int,
        page: int,
    ) -> GitHubCompareResponse:
        """
        调用 compare API：GET /repos/{owner}/{repo}/compare/{basehead}

        注意：分页参数只影响 commits 列表；files 只在第一页完整返回（最多 300 个）。
        """
        # ref 里的 "/" 需要编码，":" 和 "..." 保留
        encoded = quote(basehead, safe=":.")
        url = f"{self._api_base_url}/repos/{owner}/{repo}/compare/{encoded}"
        response = await self._http_client.get(
            url,
            headers=self._headers(),
            params={"per_page": per_page, "page": page},
        )
        if response.status_code != 200:
            return GitHubCompareResponse(status_code=response.status_code)
        return GitHubCompareResponse(
            status_code=response.status_code,
            data=GitHubComparison.model_validate(response.json()),
        )
