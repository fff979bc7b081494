"""Pydantic schemas for runtime validation of run options."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DELIMITER_ALIASES: dict[str, str] = {
    ",": ",",
    "comma": ",",
    "\t": "\t",
    "\\t": "\t",
    "tab": "\t",
    "|": "|",
    "pipe": "|",
}


def _parse_int(value: object) -> object:
    """Parse textual integers strictly; leave other values to pydantic."""
    if isinstance(value, bool):
        raise ValueError("expected an integer, got a boolean.")
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 10)
        except ValueError as exc:
            raise ValueError(f"expected an integer, got '{value}'.") from exc
    return value


class RunOptionsConfig(BaseModel):
    """Validated input for one batch conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: int = Field(default=2, ge=0)
    delimiter: Literal[",", "\t", "|"] = ","
    key_folding: Literal["off", "safe"] = "off"
    flatten_depth: int | None = Field(default=None, ge=0)
    clean: bool = False
    verbose: bool = False

    @field_validator("indent", "flatten_depth", mode="before")
    @classmethod
    def _coerce_integer(cls, value: object) -> object:
        if value is None:
            return value
        return _parse_int(value)

    @field_validator("delimiter", mode="before")
    @classmethod
    def _normalize_delimiter(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        key = value if value in DELIMITER_ALIASES else value.strip().lower()
        try:
            return DELIMITER_ALIASES[key]
        except KeyError as exc:
            raise ValueError(
                "expected one of ',' (comma), '\\t' (tab) or '|' (pipe), "
                f"got {value!r}."
            ) from exc

    @field_validator("key_folding", mode="before")
    @classmethod
    def _check_key_folding(cls, value: object) -> object:
        if isinstance(value, str) and value not in {"off", "safe"}:
            raise ValueError(f"expected 'off' or 'safe', got '{value}'.")
        return value
