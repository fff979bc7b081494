"""Document encoders implementing the application ``Encoder`` port."""

from __future__ import annotations

import importlib
from types import ModuleType

from toon_converter.application.options import EncodeOptions
from toon_converter.errors import EncodingError, MissingDependencyError
from toon_converter.types import JsonValue

TOON_EXTENSION = ".toon"


def _load_toon_module() -> ModuleType:
    try:
        return importlib.import_module("toon_format")
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "TOON encoding requires the 'toon-format' package. "
            'Install extra: pip install "toon-batch-converter[toon]"'
        ) from exc


def build_toon_options(options: EncodeOptions) -> dict[str, object]:
    """Map encode options onto the ``toon_format.encode`` option dict.

    Key folding and flatten depth are only forwarded when they differ from
    the library defaults.
    """
    payload: dict[str, object] = {
        "indent": options.indent,
        "delimiter": options.delimiter,
    }
    if options.key_folding != "off":
        payload["keyFolding"] = options.key_folding
    if options.flatten_depth is not None:
        payload["flattenDepth"] = options.flatten_depth
    return payload


class ToonEncoder:
    """Encode documents to TOON through the ``toon_format`` library."""

    extension = TOON_EXTENSION

    def __init__(self) -> None:
        self._module: ModuleType | None = None

    def encode(self, document: JsonValue, options: EncodeOptions) -> str:
        """Encode a parsed JSON document as TOON text.

        Parameters
        ----------
        document : JsonValue
            Parsed JSON value.
        options : EncodeOptions
            Formatting configuration.

        Returns
        -------
        str
            Encoded TOON text.

        Raises
        ------
        MissingDependencyError
            If ``toon_format`` is not installed.
        EncodingError
            If the library rejects the document or options.
        """
        if self._module is None:
            self._module = _load_toon_module()
        try:
            return str(self._module.encode(document, build_toon_options(options)))
        except Exception as exc:
            raise EncodingError(f"Failed to encode TOON: {exc}") from exc
