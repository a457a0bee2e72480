"""
Parsers turn raw resource bytes into typed decoded items.

Only JSON is required: the content must be an array of objects whose values
are scalars. Anything else is a DecodeError.
"""

from __future__ import annotations

import json
from typing import List, Protocol, Union, runtime_checkable

from item_sorter.domain.errors import DecodeError
from item_sorter.domain.models import FORMAT_JSON, DecodedItem
from item_sorter.utils.logging import get_logger

log = get_logger(__name__)

_SCALARS = (str, int, float, bool, type(None))


def _reject_constant(token: str) -> None:
    # json accepts NaN and Infinity, which are not valid JSON
    raise DecodeError(f"json_decode error appeared: invalid constant {token!r}")


@runtime_checkable
class Parser(Protocol):
    """Capability every parser exposes."""

    format: str

    def parse(self, content: Union[bytes, str]) -> List[DecodedItem]:
        """Decode `content` into a list of key/value items."""
        ...


class JsonParser:
    """Decode a JSON array of flat objects."""

    FORMAT_JSON = FORMAT_JSON

    def __init__(self, format: str = FORMAT_JSON) -> None:
        self.format = format

    def parse(self, content: Union[bytes, str]) -> List[DecodedItem]:
        try:
            raw = json.loads(content, parse_constant=_reject_constant)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"json_decode error appeared: {exc}") from exc

        if not isinstance(raw, list):
            raise DecodeError(f"Expected a JSON array, got {type(raw).__name__}")

        items: List[DecodedItem] = []
        for position, element in enumerate(raw):
            if not isinstance(element, dict):
                raise DecodeError(
                    f"Element {position} is {type(element).__name__}, expected an object"
                )
            for key, value in element.items():
                if not isinstance(value, _SCALARS):
                    raise DecodeError(
                        f"Element {position} field {key!r} is not a scalar value"
                    )
            items.append(element)

        log.debug("Parsed content", extra={"format": self.format, "items": len(items)})
        return items

    def __repr__(self) -> str:
        return f"JsonParser(format={self.format!r})"


__all__ = ["Parser", "JsonParser"]
