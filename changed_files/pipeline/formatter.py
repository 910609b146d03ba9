"""
Formatter（确定性输出）。

- space-delimited：空格拼接（classifier 已拒绝含空格的文件名）
- csv：逗号拼接，不做转义
- json：紧凑 JSON 数组，唯一能安全表示含空格/逗号文件名的格式
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from changed_files.pipeline.models import ClassificationResult
from changed_files.pipeline.models import OutputFormat


def format_file_list(files: Sequence[str], fmt: OutputFormat) -> str:
    if fmt is OutputFormat.SPACE_DELIMITED:
        return " ".join(files)
    if fmt is OutputFormat.CSV:
        return ",".join(files)
    if fmt is OutputFormat.JSON:
        return json.dumps(list(files), separators=(",", ":"), ensure_ascii=False)
    raise ValueError(f"Unknown output format: {fmt}")


def build_outputs(result: ClassificationResult, fmt: OutputFormat) -> dict[str, str]:
    """返回 output 名 -> 序列化字符串；`deleted` 是 `removed` 的兼容别名。"""
    return {
        "all": format_file_list(result.all, fmt),
        "added": format_file_list(result.added, fmt),
        "modified": format_file_list(result.modified, fmt),
        "removed": format_file_list(result.removed, fmt),
        "renamed": format_file_list(result.renamed, fmt),
        "added_modified": format_file_list(result.added_modified, fmt),
        "deleted": format_file_list(result.deleted, fmt),
    }
