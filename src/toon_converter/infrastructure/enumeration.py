"""Input directory listing and entry classification."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from toon_converter.errors import WorkspaceError

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class DirectoryEntry:
    """Candidate input item found in the input directory."""

    name: str
    path: Path
    processable: bool
    skip_reason: str | None = None


def _is_regular_file(path: Path) -> bool:
    return stat.S_ISREG(path.stat().st_mode)


def classify_entry(path: Path) -> DirectoryEntry:
    """Classify a single path as processable or skipped.

    A stat failure is logged and treated as not processable.
    """
    name = path.name
    try:
        regular = _is_regular_file(path)
    except OSError as exc:
        logger.warning("Cannot stat %s, skipping: %s", path, exc)
        return DirectoryEntry(name, path, False, f"cannot stat entry: {exc}")

    if not regular:
        return DirectoryEntry(name, path, False, "not a regular file")
    if not name.lower().endswith(JSON_SUFFIX):
        return DirectoryEntry(name, path, False, "not a .json file")
    return DirectoryEntry(name, path, True)


def list_entries(input_dir: Path) -> list[DirectoryEntry]:
    """List and classify the immediate entries of ``input_dir``.

    Parameters
    ----------
    input_dir : Path
        Directory to scan. Subdirectories are not descended into.

    Returns
    -------
    list[DirectoryEntry]
        Entries sorted by name.

    Raises
    ------
    WorkspaceError
        If the directory itself cannot be listed.
    """
    try:
        names = sorted(os.listdir(input_dir))
    except OSError as exc:
        raise WorkspaceError(f"Cannot list input directory {input_dir}: {exc}") from exc
    return [classify_entry(input_dir / name) for name in names]
