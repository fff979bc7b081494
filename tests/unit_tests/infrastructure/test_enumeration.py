"""Unit tests for input directory enumeration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from toon_converter.errors import WorkspaceError
from toon_converter.infrastructure import enumeration
from toon_converter.infrastructure.enumeration import classify_entry, list_entries


def test_list_entries_classifies_and_sorts(input_dir: Path) -> None:
    """Only regular .json files are processable; order is by name."""
    (input_dir / "b.json").write_text("{}", encoding="utf-8")
    (input_dir / "a.JSON").write_text("{}", encoding="utf-8")
    (input_dir / "notes.txt").write_text("hi", encoding="utf-8")
    (input_dir / "nested.json").mkdir()
    (input_dir / "nested.json" / "inner.json").write_text("{}", encoding="utf-8")

    entries = list_entries(input_dir)

    assert [e.name for e in entries] == ["a.JSON", "b.json", "nested.json", "notes.txt"]
    assert [e.processable for e in entries] == [True, True, False, False]
    assert entries[2].skip_reason == "not a regular file"
    assert entries[3].skip_reason == "not a .json file"


def test_list_entries_does_not_recurse(input_dir: Path) -> None:
    """Files inside subdirectories are never listed."""
    sub = input_dir / "sub"
    sub.mkdir()
    (sub / "inner.json").write_text("{}", encoding="utf-8")

    entries = list_entries(input_dir)

    assert [e.name for e in entries] == ["sub"]


def test_list_entries_empty_directory(input_dir: Path) -> None:
    """An empty directory yields no entries."""
    assert list_entries(input_dir) == []


def test_list_missing_directory_raises(tmp_path: Path) -> None:
    """Failure to list the directory itself is fatal."""
    with pytest.raises(WorkspaceError, match="Cannot list input directory"):
        list_entries(tmp_path / "missing")


def test_stat_failure_is_logged_and_skipped(
    input_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A stat error classifies the entry as skipped with a warning."""
    target = input_dir / "locked.json"
    target.write_text("{}", encoding="utf-8")

    def _deny(path: Path) -> bool:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(enumeration, "_is_regular_file", _deny)

    with caplog.at_level(logging.WARNING, logger=enumeration.__name__):
        entry = classify_entry(target)

    assert entry.processable is False
    assert entry.skip_reason is not None
    assert "cannot stat" in entry.skip_reason
    assert "locked.json" in caplog.text
