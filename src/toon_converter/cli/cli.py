#!/usr/bin/env python3
"""
toon_converter.cli.cli

Typer-based CLI for batch-converting JSON documents to TOON.

The TOON encoder library is an optional extra so the core stays importable
without it.

Examples
--------
Install core + encoder:

    uv pip install -e ".[toon]"

Convert ``./input_json/*.json`` into ``./output_toon/*.toon``:

    convert-to-toon convert --indent 4 --delimiter tab --clean
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from toon_converter.application.ports import Encoder
from toon_converter.application.reporting import RunReporter
from toon_converter.errors import ToonConverterError

app = typer.Typer(
    name="convert-to-toon",
    help="Batch-convert JSON documents to TOON.",
    no_args_is_help=True,
)

LOG_FORMAT = "%(levelname)s: %(message)s"


# -----------------------------
# Dependency checks / utilities
# -----------------------------
@dataclass(frozen=True)
class MissingDep:
    """Represent a missing optional dependency."""

    import_name: str
    extra_name: str
    purpose: str


def _is_importable(module: str) -> bool:
    """Check whether a module can be resolved.

    Parameters
    ----------
    module : str
        Module name to resolve.

    Returns
    -------
    bool
        ``True`` if the module can be imported, otherwise ``False``.
    """
    import importlib.util

    try:
        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        return False


def _require_deps(missing: Sequence[MissingDep]) -> None:
    """Raise a Typer error if any required deps are missing.

    Parameters
    ----------
    missing : Sequence[MissingDep]
        Missing dependency requirements for a command.
    """
    not_found = [d for d in missing if not _is_importable(d.import_name)]
    if not not_found:
        return

    extras = sorted({d.extra_name for d in not_found})
    details = "\n".join(
        f"- Missing '{d.import_name}' ({d.purpose}). Install extra: .[{d.extra_name}]"
        for d in not_found
    )

    uv_hint = f'uv pip install -e ".[{",".join(extras)}]"'
    pip_hint = f'pip install "toon-batch-converter[{",".join(extras)}]"'

    msg = (
        "Missing optional dependencies for this command.\n\n"
        f"{details}\n\n"
        "Install with uv (recommended):\n"
        f"  {uv_hint}\n\n"
        "Or with pip:\n"
        f"  {pip_hint}\n"
    )
    raise typer.BadParameter(msg)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _default_encoder() -> Encoder:
    """Build the ``toon_format``-backed encoder."""
    from toon_converter.api import default_encoder

    return default_encoder()


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    indent: str | None = typer.Option(
        None, "--indent", help="Indentation width (non-negative integer, default 2)."
    ),
    delimiter: str | None = typer.Option(
        None,
        "--delimiter",
        help="Array delimiter: ',' (comma), '\\t' (tab) or '|' (pipe). Default ','.",
    ),
    key_folding: str | None = typer.Option(
        None,
        "--keyFolding",
        "--key-folding",
        help="Key folding mode: off or safe. Default off.",
    ),
    flatten_depth: str | None = typer.Option(
        None,
        "--flattenDepth",
        "--flatten-depth",
        help="Maximum key folding depth (non-negative integer).",
    ),
    clean: bool = typer.Option(
        False, "--clean", help="Empty the output directory before converting."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="List skipped entries and debug logs."
    ),
    input_dir: Path | None = typer.Option(
        None, "--input-dir", help="Input directory (default: ./input_json)."
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Output directory (default: ./output_toon)."
    ),
) -> None:
    """Convert every .json file of the input directory to .toon.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    indent : str | None
        Raw indentation width, validated before any file I/O.
    delimiter : str | None
        Raw delimiter value.
    key_folding : str | None
        Raw key folding mode.
    flatten_depth : str | None
        Raw flatten depth.
    clean : bool, default=False
        Whether to clear the output directory first.
    verbose : bool, default=False
        Whether to print skipped entries and debug logs.

    Notes
    -----
    - Requires the `toon` extra.
    - Exits 1 if any file failed to convert, 2 on invalid options.
    """
    debug: bool = bool(ctx.obj.get("debug", False)) if ctx.obj else False

    from toon_converter.application.use_cases import (
        resolve_run_options,
        run_batch,
    )
    from toon_converter.infrastructure.workspace import resolve_workspace

    try:
        options = resolve_run_options(
            indent=indent,
            delimiter=delimiter,
            key_folding=key_folding,
            flatten_depth=flatten_depth,
            clean=clean,
            verbose=verbose,
        )
    except ToonConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    _require_deps([MissingDep("toon_format", "toon", "TOON encoding")])
    _configure_logging(options.verbose)

    cwd = Path.cwd()
    workspace = resolve_workspace(cwd, input_dir=input_dir, output_dir=output_dir)
    reporter = RunReporter(echo=typer.echo, verbose=options.verbose, base_dir=cwd)
    reporter.start(workspace.input_dir, workspace.output_dir)

    try:
        result = run_batch(
            workspace=workspace,
            options=options,
            encoder=_default_encoder(),
            listener=reporter,
        )
    except ToonConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    raise typer.Exit(code=reporter.finish(result))


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions."""
    import importlib.metadata as metadata

    modules = [
        "toon-format",
        "typer",
        "pydantic",
    ]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    if not _is_importable("toon_format"):
        typer.echo(
            "Note: the 'convert' command needs the toon extra "
            '(pip install "toon-batch-converter[toon]").'
        )


if __name__ == "__main__":
    app()
