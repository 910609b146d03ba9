from __future__ import annotations

import pytest

from changed_files.errors import IllegalFilenameError
from changed_files.errors import UnknownFileStatusError
from changed_files.pipeline.classifier import classify_files
from changed_files.pipeline.classifier import filter_files
from changed_files.pipeline.classifier import parse_filter
from changed_files.pipeline.models import ChangedFile
from changed_files.pipeline.models import OutputFormat


def _files(*pairs: tuple[str, str]) -> list[ChangedFile]:
    return [ChangedFile(filename=name, status=status) for name, status in pairs]


def test_parse_filter_trims_whitespace() -> None:
    assert parse_filter("dir/**, **/*.inc ,src/*.py") == ["dir/**", "**/*.inc", "src/*.py"]


def test_parse_filter_keeps_brace_commas() -> None:
    assert parse_filter("src/*.{ts,js}, docs/**") == ["src/*.{ts,js}", "docs/**"]
    assert parse_filter(" , ,") == []


def test_filter_files_without_filter_keeps_everything() -> None:
    files = _files(("a.txt", "added"), ("b.txt", "removed"))
    assert filter_files(files, None) == files
    assert filter_files(files, "") == files


def test_filter_files_globstar_and_order() -> None:
    files = _files(
        ("file.txt", "modified"),
        ("dir/file2.txt", "renamed"),
        ("addedFile", "added"),
        ("removedFile.inc", "removed"),
        ("dir/nested/deep.inc", "added"),
    )
    kept = filter_files(files, "dir/**, **/*.inc")
    assert [f.filename for f in kept] == ["dir/file2.txt", "removedFile.inc", "dir/nested/deep.inc"]


def test_filter_files_brace_expansion_and_char_class() -> None:
    files = _files(("src/a.ts", "added"), ("src/b.js", "added"), ("src/c.py", "added"), ("lib1.rs", "added"))
    kept = filter_files(files, "src/*.{ts,js},lib[0-9].rs")
    assert [f.filename for f in kept] == ["src/a.ts", "src/b.js", "lib1.rs"]


def test_classify_partitions_by_status_in_order() -> None:
    files = _files(
        ("m1", "modified"),
        ("a1", "added"),
        ("r1", "removed"),
        ("n1", "renamed"),
        ("a2", "added"),
        ("m2", "modified"),
    )
    result = classify_files(files, OutputFormat.CSV)
    assert result.all == ("m1", "a1", "r1", "n1", "a2", "m2")
    assert result.added == ("a1", "a2")
    assert result.modified == ("m1", "m2")
    assert result.removed == ("r1",)
    assert result.renamed == ("n1",)
    assert result.added_modified == ("m1", "a1", "a2", "m2")
    assert result.deleted == result.removed


def test_classify_rejects_space_only_for_space_delimited() -> None:
    files = _files(("ok.txt", "added"), ("has space.txt", "added"))
    with pytest.raises(IllegalFilenameError) as exc_info:
        classify_files(files, OutputFormat.SPACE_DELIMITED)
    assert exc_info.value.filename == "has space.txt"
    assert classify_files(files, OutputFormat.JSON).added == ("ok.txt", "has space.txt")


@pytest.mark.parametrize("status", ["copied", "changed", "unchanged", "ADDED"])
def test_classify_rejects_unknown_status(status: str) -> None:
    with pytest.raises(UnknownFileStatusError) as exc_info:
        classify_files(_files(("x.txt", status)), OutputFormat.JSON)
    assert exc_info.value.status == status
    assert exc_info.value.filename == "x.txt"


def test_classify_empty_list() -> None:
    result = classify_files([], OutputFormat.SPACE_DELIMITED)
    assert result.all == ()
    assert result.added_modified == ()


def test_filter_files_negated_pattern_only() -> None:
    files = _files(("a.md", "added"), ("b.py", "added"), ("docs/c.py", "modified"))
    kept = filter_files(files, "!*.md")
    assert [f.filename for f in kept] == ["b.py", "docs/c.py"]


def test_filter_files_negation_excludes_from_positive_matches() -> None:
    files = _files(("src/a.py", "added"), ("src/a_test.py", "added"), ("README.md", "modified"))
    kept = filter_files(files, "src/**, !**/*_test.py")
    assert [f.filename for f in kept] == ["src/a.py"]
