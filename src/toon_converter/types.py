"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal, TypeAlias

Delimiter: TypeAlias = Literal[",", "\t", "|"]
KeyFoldingMode: TypeAlias = Literal["off", "safe"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"
