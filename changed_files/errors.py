"""
错误类型（全部为终止性错误，不做重试）。

约定：
- 各阶段检测到问题时直接 raise，不要自己调用 set_failed
- 只有 orchestrator 统一捕获并上报一条错误信息
"""

from __future__ import annotations

_REPORT_ISSUE_HINT = "Please submit an issue on this action's GitHub repo."


class ChangedFilesError(RuntimeError):
    """所有可预期失败的基类。"""

    pass


class ConfigurationError(ChangedFilesError):
    """format 参数不合法。"""

    pass


class UnsupportedEventError(ChangedFilesError):
    def __init__(self, event_name: str) -> None:
        super().__init__(
            f"This action only supports pull requests and pushes, {event_name} events are not supported. "
            "Please submit an issue on this action's GitHub repo if you believe this in correct."
        )
        self.event_name = event_name


class UnresolvedReferenceError(ChangedFilesError):
    """head owner 或 base/head ref 无法从 payload 中解析。"""

    pass


class UpstreamStatusError(ChangedFilesError):
    def __init__(self, event_name: str, status_code: int, expected: int = 200) -> None:
        super().__init__(
            f"The GitHub API for comparing the base and head commits for this {event_name} event "
            f"returned {status_code}, expected {expected}. {_REPORT_ISSUE_HINT}"
        )
        self.status_code = status_code
        self.expected = expected


class NotAheadError(ChangedFilesError):
    def __init__(self, event_name: str, status: str | None) -> None:
        super().__init__(
            f"The head commit for this {event_name} event is not ahead of the base commit. "
            "Please ensure your changes are on top of the base branch so that comparison is accurate."
        )
        self.status = status


class IllegalFilenameError(ChangedFilesError):
    def __init__(self, filename: str) -> None:
        super().__init__(
            f"One of your files includes a space ({filename}). "
            "Consider using a different output format or removing spaces from your filenames. "
            f"{_REPORT_ISSUE_HINT}"
        )
        self.filename = filename


class UnknownFileStatusError(ChangedFilesError):
    def __init__(self, status: object, filename: str) -> None:
        super().__init__(
            f"One of your files includes an unsupported file status '{status}' for '{filename}', "
            "expected 'added', 'modified', 'removed', or 'renamed'."
        )
        self.status = status
        self.filename = filename


class UnexpectedError(ChangedFilesError):
    """包装 pipeline 中任何非预期异常（网络错误、payload 结构异常等）。"""

    @classmethod
    def from_exception(cls, exc: BaseException) -> UnexpectedError:
        message = str(exc) or exc.__class__.__name__
        error = cls(message)
        error.__cause__ = exc
        return error
