"""Input/output directory lifecycle."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from toon_converter.errors import WorkspaceError

logger = logging.getLogger(__name__)

DEFAULT_INPUT_DIRNAME = "input_json"
DEFAULT_OUTPUT_DIRNAME = "output_toon"


@dataclass(frozen=True)
class Workspace:
    """Pair of directories a run reads from and writes to."""

    input_dir: Path
    output_dir: Path


def resolve_workspace(
    cwd: Path,
    input_dir: Path | None = None,
    output_dir: Path | None = None,
) -> Workspace:
    """Resolve workspace directories against a working directory.

    Parameters
    ----------
    cwd : Path
        Base directory for relative and default paths.
    input_dir : Path | None, default=None
        Input directory override. Defaults to ``cwd / "input_json"``.
    output_dir : Path | None, default=None
        Output directory override. Defaults to ``cwd / "output_toon"``.

    Returns
    -------
    Workspace
        Absolute input/output directories.
    """
    return Workspace(
        input_dir=cwd / (input_dir or DEFAULT_INPUT_DIRNAME),
        output_dir=cwd / (output_dir or DEFAULT_OUTPUT_DIRNAME),
    )


def _ensure_dir(path: Path, label: str) -> None:
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WorkspaceError(f"Cannot create {label} directory {path}: {exc}") from exc
    logger.info("Created %s directory: %s", label, path)


def prepare_workspace(workspace: Workspace, clean: bool = False) -> None:
    """Make sure both directories exist, optionally emptying the output one.

    Parameters
    ----------
    workspace : Workspace
        Directories to prepare.
    clean : bool, default=False
        Remove everything under the output directory before the run.

    Raises
    ------
    WorkspaceError
        If a directory cannot be created or cleared.
    """
    _ensure_dir(workspace.input_dir, "input")
    if clean and workspace.output_dir.exists():
        try:
            shutil.rmtree(workspace.output_dir)
        except OSError as exc:
            raise WorkspaceError(
                f"Cannot clean output directory {workspace.output_dir}: {exc}"
            ) from exc
        logger.info("Cleaned output directory: %s", workspace.output_dir)
    _ensure_dir(workspace.output_dir, "output")
