"""
Action 配置加载。

设计目标：
- **严格**：缺少必要环境变量就直接报错（避免"看起来跑了其实没配置好"）
- **类型安全**：使用 Pydantic 校验 URL/字符串等
- **可测试**：核心加载函数接收 `environ` 显式输入，便于单元测试

GitHub Actions 会把 `with:` 里的输入以 `INPUT_<NAME>` 环境变量传进来，
事件 payload 则写在 `GITHUB_EVENT_PATH` 指向的 JSON 文件里。
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping

from pydantic import BaseModel, HttpUrl

from changed_files.pipeline.models import ActionContext
from changed_files.pipeline.models import RepositoryCoordinate
from changed_files.pipeline.models import RunOptions

DEFAULT_API_URL = "https://api.github.com"


class AppConfig(BaseModel):
    """一次 action 运行所需的全部配置。"""

    token: str
    api_base_url: HttpUrl
    options: RunOptions
    context: ActionContext
    debug: bool = False


def get_input(environ: Mapping[str, str], name: str) -> str:
    """与 @actions/core getInput 一致：名字转大写、空格转下划线、值去掉首尾空白。"""
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return environ.get(key, "").strip()


def parse_repository(value: str) -> RepositoryCoordinate:
    owner, sep, name = value.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ValueError(f"GITHUB_REPOSITORY must look like 'owner/repo', got '{value}'")
    return RepositoryCoordinate(owner=owner, name=name)


def load_event_payload(path: str | None) -> dict[str, object]:
    """读取事件 payload；路径缺失或文件不存在时返回空 payload。"""
    if not path or not os.path.exists(path):
        return {}
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError(f"Event payload at {path} must be a JSON object")
    return payload


def is_debug_enabled(environ: Mapping[str, str]) -> bool:
    return environ.get("RUNNER_DEBUG", "") == "1"


def load_config_from_env(environ: Mapping[str, str]) -> AppConfig:
    """
    从环境变量加载并校验配置。

    - **输入**：`environ`（例如 `os.environ`）
    - **输出**：`AppConfig`
    - **失败**：缺失/为空则抛 `ValueError`

    注意：这里不校验 format 取值，由 pipeline 的 validate_format 负责。
    """
    missing: list[str] = []
    for name in ("token", "format"):
        if not get_input(environ, name):
            missing.append(f"INPUT_{name.upper()}")
    for key in ("GITHUB_EVENT_NAME", "GITHUB_REPOSITORY"):
        if not environ.get(key):
            missing.append(key)
    if missing:
        raise ValueError(f"Missing required env vars: {', '.join(missing)}")

    filter_value = get_input(environ, "filter")
    return AppConfig(
        token=get_input(environ, "token"),
        api_base_url=environ.get("GITHUB_API_URL") or DEFAULT_API_URL,
        options=RunOptions(
            format=get_input(environ, "format"),
            filter=filter_value or None,
        ),
        context=ActionContext(
            event_name=environ["GITHUB_EVENT_NAME"],
            payload=load_event_payload(environ.get("GITHUB_EVENT_PATH")),
            repo=parse_repository(environ["GITHUB_REPOSITORY"]),
        ),
        debug=is_debug_enabled(environ),
    )
