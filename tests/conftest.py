"""Shared pytest configuration, marker assignment and fakes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from toon_converter.application.options import EncodeOptions
from toon_converter.errors import EncodingError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeEncoder:
    """Deterministic encoder standing in for the TOON library."""

    extension = ".toon"

    def __init__(self) -> None:
        self.calls: list[tuple[object, EncodeOptions]] = []

    def encode(self, document: object, options: EncodeOptions) -> str:
        self.calls.append((document, options))
        if isinstance(document, dict) and "__reject__" in document:
            raise EncodingError("unsupported structure")
        body = json.dumps(document, sort_keys=True, indent=options.indent)
        return f"{body}\n# delimiter={options.delimiter!r} folding={options.key_folding}\n"


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    """Provide a fresh recording encoder."""
    return FakeEncoder()


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Create the default input directory under a temporary cwd."""
    path = tmp_path / "input_json"
    path.mkdir()
    return path
