"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from toon_converter.application.options import EncodeOptions, RunOptions
from toon_converter.application.ports import Encoder, OutcomeListener
from toon_converter.application.results import (
    BatchResult,
    ConversionOutcome,
    OutcomeStatus,
    RunStats,
)


def resolve_run_options(
    *,
    indent: str | int | None = None,
    delimiter: str | None = None,
    key_folding: str | None = None,
    flatten_depth: str | int | None = None,
    clean: bool = False,
    verbose: bool = False,
) -> RunOptions:
    """Resolve typed run options via lazy use-case import."""
    from toon_converter.application.use_cases import resolve_run_options as _impl

    return _impl(
        indent=indent,
        delimiter=delimiter,
        key_folding=key_folding,
        flatten_depth=flatten_depth,
        clean=clean,
        verbose=verbose,
    )


def convert_directory(
    *,
    cwd: Path,
    options: RunOptions,
    encoder: Encoder,
    input_dir: Path | None = None,
    output_dir: Path | None = None,
    listener: OutcomeListener | None = None,
) -> BatchResult:
    """Run a batch conversion via lazy use-case import."""
    from toon_converter.application.use_cases import convert_directory as _impl

    return _impl(
        cwd=cwd,
        options=options,
        encoder=encoder,
        input_dir=input_dir,
        output_dir=output_dir,
        listener=listener,
    )


__all__ = [
    "BatchResult",
    "ConversionOutcome",
    "EncodeOptions",
    "Encoder",
    "OutcomeListener",
    "OutcomeStatus",
    "RunOptions",
    "RunStats",
    "convert_directory",
    "resolve_run_options",
]
