"""Exception hierarchy for batch TOON conversion."""

from __future__ import annotations


class ToonConverterError(Exception):
    """Base error for all converter failures."""

    exit_code: int = 1


class InvalidOption(ToonConverterError):
    """Raised when a run option is missing, malformed or out of range."""

    exit_code = 2

    def __init__(self, option: str, message: str) -> None:
        super().__init__(f"Invalid value for '{option}': {message}")
        self.option = option


class WorkspaceError(ToonConverterError):
    """Raised when the input/output directories cannot be prepared or listed."""


class EncodingError(ToonConverterError):
    """Raised by an encoder that cannot serialize a document."""


class MissingDependencyError(ToonConverterError):
    """Raised when the default encoder library is not installed."""
