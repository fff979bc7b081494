"""Top-level API for batch JSON-to-TOON conversion."""

from __future__ import annotations

from pathlib import Path

from toon_converter.application.ports import Encoder, OutcomeListener
from toon_converter.application.results import BatchResult

__version__ = "0.1.0"


def convert_json_directory_to_toon(
    cwd: Path | None = None,
    input_dir: Path | None = None,
    output_dir: Path | None = None,
    *,
    indent: int = 2,
    delimiter: str = ",",
    key_folding: str = "off",
    flatten_depth: int | None = None,
    clean: bool = False,
    encoder: Encoder | None = None,
    listener: OutcomeListener | None = None,
) -> BatchResult:
    """Convert a directory of JSON documents to TOON.

    Parameters
    ----------
    cwd : Path | None, default=None
        Base directory for the workspace. Defaults to the current directory.
    input_dir : Path | None, default=None
        Input directory, relative to ``cwd``. Defaults to ``input_json``.
    output_dir : Path | None, default=None
        Output directory, relative to ``cwd``. Defaults to ``output_toon``.
    indent : int, default=2
        Indentation width passed to the encoder.
    delimiter : str, default=","
        Array delimiter: comma, tab or pipe.
    key_folding : str, default="off"
        Key-folding mode, ``off`` or ``safe``.
    flatten_depth : int | None, default=None
        Maximum folding depth; encoder default when ``None``.
    clean : bool, default=False
        Empty the output directory first.
    encoder : Encoder | None, default=None
        Encoder override. Defaults to the ``toon_format`` adapter.
    listener : OutcomeListener | None, default=None
        Called with each outcome as it is produced.

    Returns
    -------
    BatchResult
        Ordered outcomes of the run.

    Raises
    ------
    InvalidOption
        If an option value is invalid. Raised before any file is touched.
    WorkspaceError
        If the workspace cannot be prepared.
    """
    from .api import convert_json_directory_to_toon as _impl

    return _impl(
        cwd=cwd,
        input_dir=input_dir,
        output_dir=output_dir,
        indent=indent,
        delimiter=delimiter,
        key_folding=key_folding,
        flatten_depth=flatten_depth,
        clean=clean,
        encoder=encoder,
        listener=listener,
    )


__all__ = [
    "BatchResult",
    "convert_json_directory_to_toon",
]
