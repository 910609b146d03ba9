"""
本地 Mock GitHub API server（只覆盖 compare two commits 一个接口）。

用途：
- 在没有真实 GitHub 的情况下，本地跑通：
  event payload -> compare API -> classify -> $GITHUB_OUTPUT

启动：
  python -m changed_files.dev.mock_github_server
然后用 GITHUB_API_URL=http://127.0.0.1:8001 运行 action。
"""

from __future__ import annotations

import time
from collections import deque

import uvicorn
from fastapi import FastAPI
from fastapi import Header
from fastapi import HTTPException


def _default_files() -> list[dict[str, object]]:
    return [
        {"filename": "src/example.py", "status": "modified", "additions": 3, "deletions": 1},
        {"filename": "docs/guide.md", "status": "added", "additions": 12, "deletions": 0},
        {"filename": "src/legacy.py", "status": "removed", "additions": 0, "deletions": 40},
        {"filename": "src/renamed.py", "status": "renamed", "previous_filename": "src/old_name.py"},
    ]


def _compare_response(basehead: str) -> dict[str, object]:
    base, sep, head = basehead.partition("...")
    if not sep:
        raise HTTPException(status_code=404, detail="Not Found")
    # 同一个 ref 比较时 GitHub 返回 identical
    if base.split(":")[-1] == head.split(":")[-1]:
        return {"status": "identical", "ahead_by": 0, "behind_by": 0, "total_commits": 0, "files": []}
    return {
        "status": "ahead",
        "ahead_by": 1,
        "behind_by": 0,
        "total_commits": 1,
        "files": _default_files(),
    }


app = FastAPI(title="Mock GitHub API", version="0.1.0")

MAX_RECORDED_REQUESTS = 100

_requests: deque[dict[str, object]] = deque(maxlen=MAX_RECORDED_REQUESTS)


@app.get("/repos/{owner}/{repo}/compare/{basehead:path}")
async def compare_commits(
    owner: str,
    repo: str,
    basehead: str,
    per_page: int = 30,
    page: int = 1,
    authorization: str | None = Header(default=None),
) -> dict[str, object]:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Requires authentication")
    _requests.append(
        {
            "owner": owner,
            "repo": repo,
            "basehead": basehead,
            "per_page": per_page,
            "page": page,
            "received_at": int(time.time()),
        }
    )
    return _compare_response(basehead=basehead)


@app.get("/__debug__/requests")
async def debug_requests() -> dict[str, object]:
    return {"count": len(_requests), "requests": list(_requests)}


def main() -> None:
    uvicorn.run(app, host="127.0.0.1", port=8001)


if __name__ == "__main__":
    main()
