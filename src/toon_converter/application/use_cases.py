"""Application use-cases orchestrating batch conversion."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from toon_converter.application.options import RunOptions
from toon_converter.application.ports import Encoder, OutcomeListener
from toon_converter.application.results import (
    BatchResult,
    ConversionOutcome,
    OutcomeStatus,
)
from toon_converter.errors import InvalidOption, MissingDependencyError
from toon_converter.infrastructure.enumeration import DirectoryEntry, list_entries
from toon_converter.infrastructure.workspace import (
    Workspace,
    prepare_workspace,
    resolve_workspace,
)
from toon_converter.schemas import RunOptionsConfig

logger = logging.getLogger(__name__)

OPTION_FLAGS = {
    "indent": "--indent",
    "delimiter": "--delimiter",
    "key_folding": "--keyFolding",
    "flatten_depth": "--flattenDepth",
    "clean": "--clean",
    "verbose": "--verbose",
}


def _invalid_option_from(exc: ValidationError) -> InvalidOption:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else "options"
    message = str(error["msg"]).removeprefix("Value error, ")
    return InvalidOption(OPTION_FLAGS.get(field, field), message)


def resolve_run_options(
    *,
    indent: str | int | None = None,
    delimiter: str | None = None,
    key_folding: str | None = None,
    flatten_depth: str | int | None = None,
    clean: bool = False,
    verbose: bool = False,
) -> RunOptions:
    """Build typed run options from raw command/API values.

    ``None`` means "use the default". No filesystem access happens here.

    Raises
    ------
    InvalidOption
        If any value is malformed or outside its allowed set.
    """
    raw: dict[str, object] = {"clean": clean, "verbose": verbose}
    if indent is not None:
        raw["indent"] = indent
    if delimiter is not None:
        raw["delimiter"] = delimiter
    if key_folding is not None:
        raw["key_folding"] = key_folding
    if flatten_depth is not None:
        raw["flatten_depth"] = flatten_depth

    try:
        config = RunOptionsConfig(**raw)
    except ValidationError as exc:
        raise _invalid_option_from(exc) from exc

    return RunOptions(
        indent=config.indent,
        delimiter=config.delimiter,
        key_folding=config.key_folding,
        flatten_depth=config.flatten_depth,
        clean=config.clean,
        verbose=config.verbose,
    )


def output_name_for(source_name: str, extension: str) -> str:
    """Replace the source extension with ``extension``, keeping the base name."""
    return Path(source_name).stem + extension


def _failed(entry: DirectoryEntry, reason: str) -> ConversionOutcome:
    logger.warning("Failed to convert %s: %s", entry.name, reason)
    return ConversionOutcome(
        status=OutcomeStatus.FAILED, source_name=entry.name, reason=reason
    )


def convert_entry(
    entry: DirectoryEntry,
    output_dir: Path,
    options: RunOptions,
    encoder: Encoder,
) -> ConversionOutcome:
    """Use-case: convert one directory entry, isolating its failures.

    Parameters
    ----------
    entry : DirectoryEntry
        Classified input entry.
    output_dir : Path
        Directory receiving the encoded file.
    options : RunOptions
        Resolved run options.
    encoder : Encoder
        Encoder used for the document.

    Returns
    -------
    ConversionOutcome
        Exactly one outcome; errors are reported, not raised.
    """
    if not entry.processable:
        logger.debug("Skipping %s: %s", entry.name, entry.skip_reason)
        return ConversionOutcome(
            status=OutcomeStatus.SKIPPED,
            source_name=entry.name,
            reason=entry.skip_reason,
        )

    try:
        content = entry.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return _failed(entry, f"Failed to read file: {exc}")

    try:
        document = json.loads(content)
    except (ValueError, RecursionError) as exc:
        return _failed(entry, f"Failed to parse JSON: {exc}")

    try:
        encoded = encoder.encode(document, options.encode_options())
    except MissingDependencyError:
        raise
    except Exception as exc:
        return _failed(entry, str(exc) or type(exc).__name__)

    output_path = output_dir / output_name_for(entry.name, encoder.extension)
    try:
        output_path.write_text(encoded, encoding="utf-8", newline="")
    except OSError as exc:
        return _failed(entry, f"Failed to write {output_path.name}: {exc}")

    logger.debug("Converted %s -> %s", entry.name, output_path)
    return ConversionOutcome(
        status=OutcomeStatus.CONVERTED,
        source_name=entry.name,
        output_path=output_path,
    )


def run_batch(
    *,
    workspace: Workspace,
    options: RunOptions,
    encoder: Encoder,
    listener: OutcomeListener | None = None,
) -> BatchResult:
    """Use-case: prepare the workspace and convert every entry in order.

    Raises
    ------
    WorkspaceError
        If the workspace cannot be prepared or the input directory listed.
    """
    prepare_workspace(workspace, clean=options.clean)
    entries = list_entries(workspace.input_dir)

    outcomes: list[ConversionOutcome] = []
    for entry in entries:
        outcome = convert_entry(entry, workspace.output_dir, options, encoder)
        outcomes.append(outcome)
        if listener is not None:
            listener(outcome)

    return BatchResult(
        input_dir=workspace.input_dir,
        output_dir=workspace.output_dir,
        entries_found=len(entries),
        outcomes=tuple(outcomes),
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
    """Use-case: resolve the workspace against ``cwd`` and run the batch."""
    workspace = resolve_workspace(cwd, input_dir=input_dir, output_dir=output_dir)
    return run_batch(
        workspace=workspace,
        options=options,
        encoder=encoder,
        listener=listener,
    )
