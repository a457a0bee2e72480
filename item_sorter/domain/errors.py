"""
Error hierarchy for item-sorter.

Every error is raised at the point of detection and propagates to the CLI,
which is the only place that catches them. There is no retry and no partial
recovery: any error aborts the current load/render pass.
"""

from __future__ import annotations


class ItemSorterError(Exception):
    """Base class for all errors raised by item-sorter."""


class NotFoundError(ItemSorterError, KeyError):
    """A storage index or registry key is absent."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class InvalidFieldError(ItemSorterError, ValueError):
    """The requested sort field does not exist on a stored record."""


class NoComparatorError(ItemSorterError):
    """A sort was requested while no comparator is set."""


class DecodeError(ItemSorterError, ValueError):
    """Serialized input is malformed or cannot be mapped onto a record."""


class DateFormatError(DecodeError):
    """A date value does not match the expected YYYY-MM-DD pattern."""


class ResourceIOError(ItemSorterError, OSError):
    """Fetching the bytes of a resource failed."""


__all__ = [
    "ItemSorterError",
    "NotFoundError",
    "InvalidFieldError",
    "NoComparatorError",
    "DecodeError",
    "DateFormatError",
    "ResourceIOError",
]
