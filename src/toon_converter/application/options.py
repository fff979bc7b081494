"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from toon_converter.types import Delimiter, KeyFoldingMode


@dataclass(frozen=True)
class EncodeOptions:
    """Formatting configuration handed to the encoder."""

    indent: int = 2
    delimiter: Delimiter = ","
    key_folding: KeyFoldingMode = "off"
    flatten_depth: int | None = None


@dataclass(frozen=True)
class RunOptions:
    """Resolved configuration for one batch conversion run."""

    indent: int = 2
    delimiter: Delimiter = ","
    key_folding: KeyFoldingMode = "off"
    flatten_depth: int | None = None
    clean: bool = False
    verbose: bool = False

    def encode_options(self) -> EncodeOptions:
        """Return the encoder-facing subset of these options."""
        return EncodeOptions(
            indent=self.indent,
            delimiter=self.delimiter,
            key_folding=self.key_folding,
            flatten_depth=self.flatten_depth,
        )
