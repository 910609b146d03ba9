from __future__ import annotations

from changed_files.pipeline.formatter import build_outputs
from changed_files.pipeline.formatter import format_file_list
from changed_files.pipeline.models import ClassificationResult
from changed_files.pipeline.models import OutputFormat


def test_format_file_list() -> None:
    files = ["a.txt", "dir/b,c.txt"]
    assert format_file_list(files, OutputFormat.SPACE_DELIMITED) == "a.txt dir/b,c.txt"
    assert format_file_list(files, OutputFormat.CSV) == "a.txt,dir/b,c.txt"
    assert format_file_list(files, OutputFormat.JSON) == '["a.txt","dir/b,c.txt"]'


def test_format_empty_list() -> None:
    assert format_file_list([], OutputFormat.CSV) == ""
    assert format_file_list([], OutputFormat.JSON) == "[]"


def test_json_keeps_non_ascii_filenames() -> None:
    assert format_file_list(["docs/über.md"], OutputFormat.JSON) == '["docs/über.md"]'


def test_build_outputs_includes_deleted_alias() -> None:
    result = ClassificationResult(
        all=("a", "b"),
        added=("a",),
        removed=("b",),
        added_modified=("a",),
    )
    outputs = build_outputs(result, OutputFormat.SPACE_DELIMITED)
    assert set(outputs) == {"all", "added", "modified", "removed", "renamed", "added_modified", "deleted"}
    assert outputs["deleted"] == outputs["removed"] == "b"
    assert outputs["modified"] == ""
