from __future__ import annotations

from changed_files.errors import ConfigurationError
from changed_files.pipeline.models import OutputFormat


def validate_format(value: str) -> OutputFormat:
    """校验 format 输入；必须在任何网络调用之前执行。"""
    try:
        return OutputFormat(value)
    except ValueError:
        raise ConfigurationError(
            f"Format must be one of 'space-delimited', 'csv', or 'json', got '{value}'."
        ) from None
