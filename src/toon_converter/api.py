"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from toon_converter.application import convert_directory
from toon_converter.application import resolve_run_options
from toon_converter.application.ports import Encoder, OutcomeListener
from toon_converter.application.results import BatchResult


def default_encoder() -> Encoder:
    """Return the TOON encoder backed by ``toon_format``."""
    from toon_converter.adapters.encoders import ToonEncoder

    return ToonEncoder()


def convert_json_directory_to_toon(
    cwd: Optional[Path] = None,
    input_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    indent: int = 2,
    delimiter: str = ",",
    key_folding: str = "off",
    flatten_depth: Optional[int] = None,
    clean: bool = False,
    encoder: Optional[Encoder] = None,
    listener: Optional[OutcomeListener] = None,
) -> BatchResult:
    """Convert every ``.json`` file of a directory into a ``.toon`` file."""
    options = resolve_run_options(
        indent=indent,
        delimiter=delimiter,
        key_folding=key_folding,
        flatten_depth=flatten_depth,
        clean=clean,
    )
    return convert_directory(
        cwd=cwd or Path.cwd(),
        options=options,
        encoder=encoder or default_encoder(),
        input_dir=input_dir,
        output_dir=output_dir,
        listener=listener,
    )
