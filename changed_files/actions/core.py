"""
GitHub Actions 输出（相当于 @actions/core 的 setOutput / setFailed 子集）。

- set_output：写入 $GITHUB_OUTPUT 文件（heredoc 格式，支持多行值）
- set_failed：输出 `::error::` workflow command，并把 exit code 设为 1
"""

from __future__ import annotations

import sys
import uuid
from collections.abc import Mapping
from typing import Protocol, TextIO


class OutputSink(Protocol):
    """pipeline 写结果/报错的出口（生产用 GitHubActionsCore，测试用记录型 fake）。"""

    def set_output(self, name: str, value: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsCore:
    def __init__(self, output_path: str | None, stream: TextIO | None = None) -> None:
        self._output_path = output_path
        self._stream = stream if stream is not None else sys.stdout
        self.exit_code = 0

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> GitHubActionsCore:
        return cls(output_path=environ.get("GITHUB_OUTPUT") or None)

    def _issue_command(self, command: str, message: str, properties: Mapping[str, str] | None = None) -> None:
        props = ""
        if properties:
            props = " " + ",".join(f"{k}={_escape_property(v)}" for k, v in properties.items())
        self._stream.write(f"::{command}{props}::{_escape_data(message)}\n")
        self._stream.flush()

    def set_output(self, name: str, value: str) -> None:
        if self._output_path is None:
            # 旧 runner 没有 GITHUB_OUTPUT 时退回 workflow command
            self._issue_command("set-output", value, properties={"name": name})
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name:
            raise ValueError(f"Unexpected input: name should not contain the delimiter {delimiter}")
        if delimiter in value:
            raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter}")
        with open(self._output_path, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self._issue_command("error", message)
