"""
High-level item loader: resource bytes -> decoded items -> records -> storage.

ItemDataLoader wires a Resource, a ResourceLoader, a Parser and a DataStorage
together. ItemFactory maps one decoded item onto a Record, coercing `id` to
int, `color` and `cost` to text, and parsing `date` from YYYY-MM-DD.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Mapping

from item_sorter.domain.errors import DateFormatError, DecodeError
from item_sorter.domain.models import DecodedItem, Record, Resource
from item_sorter.infrastructure.resource_loaders import ResourceLoader
from item_sorter.parsers import Parser
from item_sorter.storage import DataStorage
from item_sorter.utils.logging import get_logger

log = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class ItemFactory:
    """Build records from decoded items; key lookup ignores case (`ID` or `id`)."""

    @classmethod
    def create(cls, item: DecodedItem) -> Record:
        fields = {str(key).lower(): value for key, value in item.items()}
        return Record(
            id=cls._to_int(cls._require(fields, "id")),
            color=cls._to_str(cls._require(fields, "color")),
            cost=cls._to_str(cls._require(fields, "cost")),
            date=cls._to_date(cls._require(fields, "date")),
        )

    @staticmethod
    def _require(fields: Mapping[str, Any], key: str) -> Any:
        if key not in fields:
            raise DecodeError(f"Decoded item has no {key!r} field")
        return fields[key]

    @staticmethod
    def _to_int(value: Any) -> int:
        try:
            if isinstance(value, (bool, float)):
                return int(value)
            return int(str(value).strip())
        except (ValueError, OverflowError):
            raise DecodeError(f"Cannot coerce {value!r} to an integer id") from None

    @staticmethod
    def _to_str(value: Any) -> str:
        return "" if value is None else str(value)

    @staticmethod
    def _to_date(value: Any) -> date:
        text = str(value)
        if not _DATE_PATTERN.fullmatch(text):
            raise DateFormatError(f"Date {value!r} does not match YYYY-MM-DD")
        try:
            return datetime.strptime(text, DATE_FORMAT).date()
        except ValueError as exc:
            raise DateFormatError(f"Date {value!r} is not a valid calendar date") from exc


class ItemDataLoader:
    """
    Populate a storage from a resource in a single pass.

    Parameters
    ----------
    resource : Resource
        What to load; its format must match the parser's.
    resource_loader : ResourceLoader
        Produces the raw bytes. The resource is attached to it on construction.
    parser : Parser
        Decodes the bytes into items.
    storage : DataStorage
        Receives one `add` per decoded item.
    """

    def __init__(
        self,
        resource: Resource,
        resource_loader: ResourceLoader,
        parser: Parser,
        storage: DataStorage,
    ) -> None:
        self._resource = resource
        self._resource_loader = resource_loader
        self._parser = parser
        self._storage = storage
        self._resource_loader.set_resource(resource)

    @property
    def format(self) -> str:
        return self._resource.format

    def load(self) -> int:
        """Fetch, decode and store every item; return the number of records added."""
        if self._parser.format != self._resource.format:
            raise DecodeError(
                f"Parser format {self._parser.format!r} does not match "
                f"resource format {self._resource.format!r}"
            )

        content = self._resource_loader.load()
        raw_items = self._parser.parse(content)

        count = 0
        for item in raw_items:
            self._storage.add(ItemFactory.create(item))
            count += 1

        log.info(
            "Items loaded",
            extra={"resource": self._resource.path, "format": self.format, "records": count},
        )
        return count


__all__ = ["ItemDataLoader", "ItemFactory", "DATE_FORMAT"]
