"""Tests for option parsing and result serialisation."""

from __future__ import annotations

from pathlib import Path

from repo_overview.models import FileRecord, OverviewOptions, OverviewResult


def test_options_default_when_mapping_missing() -> None:
    assert OverviewOptions.from_mapping(None) == OverviewOptions()
    assert OverviewOptions.from_mapping({}).dir == "."


def test_options_accept_hyphenated_keys_and_ignore_unknown() -> None:
    options = OverviewOptions.from_mapping(
        {"dir": Path("/work"), "max-depth": "2", "max_nodes": 10, "out": None, "format": "json"}
    )
    assert options == OverviewOptions(dir="/work", max_depth=2, max_nodes=10, out=None)


def test_file_record_segments() -> None:
    record = FileRecord(path="src/app/main.py", absolute=Path("/repo/src/app/main.py"))
    assert record.segments == ("src", "app", "main.py")


def test_overview_result_to_dict() -> None:
    result = OverviewResult(
        name="repo",
        root="/repo",
        file_count=1,
        languages=(("Python", 1),),
        readme_headline=None,
        tree="├─ main.py",
        keyfiles=(),
    )
    assert result.to_dict() == {
        "name": "repo",
        "root": "/repo",
        "file_count": 1,
        "languages": [["Python", 1]],
        "readme_headline": None,
        "tree": "├─ main.py",
        "keyfiles": [],
    }
