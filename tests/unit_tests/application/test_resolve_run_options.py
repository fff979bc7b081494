"""Unit tests for run option resolution and validation."""

from __future__ import annotations

import dataclasses

import pytest

from toon_converter.application.options import EncodeOptions, RunOptions
from toon_converter.application.use_cases import resolve_run_options
from toon_converter.errors import InvalidOption


def test_defaults_when_nothing_is_given() -> None:
    """Resolve documented defaults for every option."""
    options = resolve_run_options()

    assert options == RunOptions(
        indent=2,
        delimiter=",",
        key_folding="off",
        flatten_depth=None,
        clean=False,
        verbose=False,
    )


def test_string_values_are_parsed() -> None:
    """Parse raw CLI strings into typed values."""
    options = resolve_run_options(
        indent="4",
        delimiter="|",
        key_folding="safe",
        flatten_depth="0",
        clean=True,
        verbose=True,
    )

    assert options.indent == 4
    assert options.delimiter == "|"
    assert options.key_folding == "safe"
    assert options.flatten_depth == 0
    assert options.clean is True
    assert options.verbose is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (",", ","),
        ("comma", ","),
        ("\t", "\t"),
        ("\\t", "\t"),
        ("TAB", "\t"),
        ("pipe", "|"),
    ],
)
def test_delimiter_spellings(raw: str, expected: str) -> None:
    """Accept the literal character, escape or name of each delimiter."""
    assert resolve_run_options(delimiter=raw).delimiter == expected


@pytest.mark.parametrize(
    ("kwargs", "flag"),
    [
        ({"indent": "-1"}, "--indent"),
        ({"indent": "two"}, "--indent"),
        ({"indent": "1.5"}, "--indent"),
        ({"delimiter": ";"}, "--delimiter"),
        ({"key_folding": "bogus"}, "--keyFolding"),
        ({"key_folding": "OFF"}, "--keyFolding"),
        ({"flatten_depth": "-3"}, "--flattenDepth"),
        ({"flatten_depth": "deep"}, "--flattenDepth"),
    ],
)
def test_invalid_values_raise_invalid_option(kwargs: dict[str, str], flag: str) -> None:
    """Reject out-of-set values and name the offending flag."""
    with pytest.raises(InvalidOption) as exc_info:
        resolve_run_options(**kwargs)

    assert exc_info.value.option == flag
    assert flag in str(exc_info.value)
    assert exc_info.value.exit_code == 2


def test_negative_indent_message_mentions_bound() -> None:
    """Surface the pydantic bound in the error message."""
    with pytest.raises(InvalidOption, match="greater than or equal to 0"):
        resolve_run_options(indent=-1)


def test_run_options_are_immutable() -> None:
    """Resolved options cannot be mutated after construction."""
    options = resolve_run_options()

    with pytest.raises(dataclasses.FrozenInstanceError):
        options.indent = 8  # type: ignore[misc]


def test_encode_options_subset() -> None:
    """Forward only formatting fields across the encoder boundary."""
    options = resolve_run_options(indent=0, delimiter="tab", flatten_depth=3, clean=True)

    assert options.encode_options() == EncodeOptions(
        indent=0, delimiter="\t", key_folding="off", flatten_depth=3
    )
