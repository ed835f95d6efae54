from __future__ import annotations

import pytest

from codeowners_lint.parser import (
    matching_entries,
    owners_by_pattern,
    owners_for_path,
    parse_codeowners,
    read_codeowners,
)
from codeowners_lint.patterns import matches, translate_pattern


REVIEWERS = "@dotnet/dotnet-docker-reviewers"


def test_skips_comments_blank_and_catch_all_lines() -> None:
    text = (
        "# Ownership\n"
        "* @org/everyone\n"
        "\n"
        "   \n"
        "*.md @org/docs\n"
        f"**/Dockerfile @org/images {REVIEWERS}\n"
        "lonely\n"
        f"src/** @org/team-a {REVIEWERS}\n"
    )
    entries = parse_codeowners(text)
    assert [e.source_pattern for e in entries.values()] == ["src/**"]


def test_round_trip_entry_matches_nested_file() -> None:
    entries = parse_codeowners(f"src/** @org/team-a {REVIEWERS}\n")
    assert len(entries) == 1
    entry = next(iter(entries.values()))
    assert entry.owner_handles == ["@org/team-a", REVIEWERS]
    assert entry.line == 1
    assert matches(entry.pattern, "src/app/main.go")


def test_last_line_without_newline_is_parsed() -> None:
    entries = parse_codeowners(f"a.txt @org/a {REVIEWERS}\nb.txt @org/b")
    assert [e.source_pattern for e in entries.values()] == ["a.txt", "b.txt"]


def test_owners_text_is_kept_whole_and_trimmed() -> None:
    entries = parse_codeowners(f"docs/   @org/docs   {REVIEWERS}   \n")
    entry = entries[translate_pattern("docs/")]
    assert entry.owners == f"@org/docs   {REVIEWERS}"
    assert entry.owner_handles == ["@org/docs", REVIEWERS]


def test_only_spaces_separate_path_and_owners() -> None:
    assert parse_codeowners("a.txt\t@org/a\n") == {}
    assert parse_codeowners("a.txt   \n") == {}


def test_later_duplicate_pattern_wins() -> None:
    entries = parse_codeowners("a.txt @org/x\na.txt @org/y\n")
    assert owners_by_pattern(entries) == {translate_pattern("a.txt"): "@org/y"}
    assert next(iter(entries.values())).line == 2


def test_owners_for_path_uses_last_matching_line() -> None:
    entries = parse_codeowners(
        "src/ @org/app\n"
        "src/special/ @org/special\n"
    )
    assert owners_for_path(entries, "src/special/x.py").owners == "@org/special"
    assert owners_for_path(entries, "src/other.py").owners == "@org/app"
    assert owners_for_path(entries, "README.md") is None
    assert [e.line for e in matching_entries(entries, "src/special/x.py")] == [1, 2]


def test_read_codeowners_missing_file_raises(tmp_path) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(FileNotFoundError):
        read_codeowners(tmp_path / "CODEOWNERS")


def test_read_codeowners_reads_utf8(tmp_path) -> None:  # type: ignore[no-untyped-def]
    p = tmp_path / "CODEOWNERS"
    p.write_text(f"# propriété\n/src/ @org/app {REVIEWERS}\n", encoding="utf-8")
    entries = read_codeowners(p)
    assert [e.source_pattern for e in entries.values()] == ["/src/"]


def test_only_cr_and_lf_end_lines() -> None:
    text = (
        "a.txt @org/a b.txt @org/b\x0cc\r\n"
        "c.txt @org/c\r"
        "d.txt @org/d\n"
    )
    entries = parse_codeowners(text)
    assert [(e.source_pattern, e.line) for e in entries.values()] == [
        ("a.txt", 1),
        ("c.txt", 2),
        ("d.txt", 3),
    ]
    assert entries[translate_pattern("a.txt")].owners == "@org/a b.txt @org/b\x0cc"


def test_read_codeowners_ignores_byte_order_mark(tmp_path) -> None:  # type: ignore[no-untyped-def]
    p = tmp_path / "CODEOWNERS"
    p.write_text(
        f"# Owners of this repo\n/src/ @org/app {REVIEWERS}\n",
        encoding="utf-8-sig",
    )
    entries = read_codeowners(p)
    assert [e.source_pattern for e in entries.values()] == ["/src/"]
    assert next(iter(entries.values())).line == 2
