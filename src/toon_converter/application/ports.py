"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from toon_converter.application.options import EncodeOptions
from toon_converter.application.results import ConversionOutcome
from toon_converter.types import JsonValue


class Encoder(Protocol):
    """Serialize a parsed JSON document into the target text format."""

    extension: str

    def encode(self, document: JsonValue, options: EncodeOptions) -> str:
        """Encode document, raising ``EncodingError`` on failure."""


class OutcomeListener(Protocol):
    """Receive each outcome as soon as it is produced."""

    def __call__(self, outcome: ConversionOutcome) -> None:
        """Handle one outcome."""
