"""Domain models and errors for item-sorter."""

from item_sorter.domain.errors import (
    DateFormatError,
    DecodeError,
    InvalidFieldError,
    ItemSorterError,
    NoComparatorError,
    NotFoundError,
    ResourceIOError,
)
from item_sorter.domain.models import FORMAT_JSON, DecodedItem, JsonResource, Record, Resource

__all__ = [
    "Record",
    "Resource",
    "JsonResource",
    "DecodedItem",
    "FORMAT_JSON",
    "ItemSorterError",
    "NotFoundError",
    "InvalidFieldError",
    "NoComparatorError",
    "DecodeError",
    "DateFormatError",
    "ResourceIOError",
]
