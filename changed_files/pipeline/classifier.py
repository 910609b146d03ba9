"""
File Classifier（确定性，不依赖网络）。

两步：
- filter：按逗号分隔的 glob 过滤文件（保持顺序）
- classify：按 status 把文件分到 added/modified/removed/renamed 等序列

classify 是 all-or-nothing：中途任何错误都直接抛出，已构建的序列全部丢弃。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wcmatch import glob

from changed_files.errors import IllegalFilenameError
from changed_files.errors import UnknownFileStatusError
from changed_files.pipeline.models import ChangedFile
from changed_files.pipeline.models import ClassificationResult
from changed_files.pipeline.models import FileStatus
from changed_files.pipeline.models import OutputFormat

logger = logging.getLogger(__name__)

# `**` 跨目录、`{a,b}` 展开、`+(...)` 等 extglob；`!` 开头为排除模式，
# 只有排除模式时隐含一个 `**`
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL


def parse_filter(filter: str) -> list[str]:
    """
    "dir/**, **/*.inc" -> ["dir/**", "**/*.inc"]（允许逗号两侧有空白）

    `{a,b}` 里的逗号属于 brace 展开，不作为分隔符。
    """
    patterns: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in filter:
        if ch == "{":
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
        elif ch == "," and depth == 0:
            patterns.append("".join(current))
            current = []
            continue
        current.append(ch)
    patterns.append("".join(current))
    return [p.strip() for p in patterns if p.strip()]


def filter_files(files: Sequence[ChangedFile], filter: str | None) -> list[ChangedFile]:
    if not filter:
        return list(files)
    patterns = parse_filter(filter)
    logger.info(f"Filtering files to match {filter}")
    kept = [f for f in files if patterns and glob.globmatch(f.filename, patterns, flags=GLOB_FLAGS)]
    logger.info(f"Filtered out {len(files) - len(kept)} files")
    return kept


def _parse_status(file: ChangedFile) -> FileStatus:
    try:
        return FileStatus(file.status)
    except ValueError:
        raise UnknownFileStatusError(status=file.status, filename=file.filename) from None


def classify_files(files: Sequence[ChangedFile], fmt: OutputFormat) -> ClassificationResult:
    """
    按出现顺序分类。

    - space-delimited 下文件名包含空格：抛 IllegalFilenameError
    - status 不在 added/modified/removed/renamed 中：抛 UnknownFileStatusError
    """
    all_files: list[str] = []
    added: list[str] = []
    modified: list[str] = []
    removed: list[str] = []
    renamed: list[str] = []
    added_modified: list[str] = []
    for file in files:
        filename = file.filename
        if fmt is OutputFormat.SPACE_DELIMITED and " " in filename:
            raise IllegalFilenameError(filename=filename)
        all_files.append(filename)
        status = _parse_status(file)
        if status is FileStatus.ADDED:
            added.append(filename)
            added_modified.append(filename)
        elif status is FileStatus.MODIFIED:
            modified.append(filename)
            added_modified.append(filename)
        elif status is FileStatus.REMOVED:
            removed.append(filename)
        elif status is FileStatus.RENAMED:
            renamed.append(filename)

    return ClassificationResult(
        all=tuple(all_files),
        added=tuple(added),
        modified=tuple(modified),
        removed=tuple(removed),
        renamed=tuple(renamed),
        added_modified=tuple(added_modified),
    )
