"""
item-sorter - load item records, sort them by any field, render them as tables.

The package provides:

- Pluggable comparators (numeric, lexical, currency, date)
- An index-addressable storage that sorts in place with the active comparator
- Resource loaders for files, URLs and Postgres documents, plus a JSON parser
- A service registry, table views and a typer CLI
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from item_sorter.comparators import (
    AbstractComparator,
    BaseComparator,
    Comparator,
    DateComparator,
    MoneyComparator,
    NumberComparator,
    StringComparator,
)
from item_sorter.config import Settings, get_settings
from item_sorter.domain import JsonResource, Record, Resource
from item_sorter.loader import ItemDataLoader, ItemFactory
from item_sorter.parsers import JsonParser
from item_sorter.registry import ServiceRegistry, build_default_registry
from item_sorter.storage import ItemDataStorage, SortState
from item_sorter.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "Resource",
    "JsonResource",
    # Comparators
    "Comparator",
    "AbstractComparator",
    "BaseComparator",
    "NumberComparator",
    "DateComparator",
    "StringComparator",
    "MoneyComparator",
    # Storage and loading
    "ItemDataStorage",
    "SortState",
    "ItemDataLoader",
    "ItemFactory",
    "JsonParser",
    # Registry
    "ServiceRegistry",
    "build_default_registry",
    # Logging
    "configure_logging",
    "get_logger",
]
