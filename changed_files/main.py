"""
Action 入口。

这里做三件事：
- 加载配置（严格校验环境变量；失败同样通过 set_failed 上报）
- 组装外部依赖（httpx.AsyncClient / GitHubClient / GitHubActionsCore）
- 跑一次 pipeline，并以 sink 的 exit code 退出

注意：
- 业务流程不写在这里（由 `pipeline/orchestrator.py` 负责）

启动：
  python -m changed_files.main
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

import anyio
import httpx

from changed_files.actions.core import GitHubActionsCore
from changed_files.config import is_debug_enabled
from changed_files.config import load_config_from_env
from changed_files.github.client import GitHubClient
from changed_files.pipeline.orchestrator import run_changed_files


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
    )
    # httpx 的请求日志会带上完整 URL，只在 debug 时打开
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


async def run_action(environ: Mapping[str, str]) -> int:
    """跑一次 action，返回进程 exit code。"""
    sink = GitHubActionsCore.from_environ(environ)
    configure_logging(debug=is_debug_enabled(environ))

    try:
        config = load_config_from_env(environ)
    except ValueError as exc:
        sink.set_failed(str(exc))
        return sink.exit_code

    async with httpx.AsyncClient(timeout=httpx.Timeout(30.0)) as http_client:
        client = GitHubClient(
            api_base_url=str(config.api_base_url),
            token=config.token,
            http_client=http_client,
        )
        await run_changed_files(context=config.context, comparer=client, options=config.options, sink=sink)
    return sink.exit_code


def main() -> None:
    raise SystemExit(anyio.run(run_action, dict(os.environ)))


if __name__ == "__main__":
    main()
