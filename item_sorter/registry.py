"""
Service registry: named lookup of shared parser and comparator instances.

The registry is an explicit container built once at startup and handed to the
entry points; there is no module-level state. `build_default_registry` wires
the standard services under their well-known names.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from item_sorter.comparators import (
    BaseComparator,
    DateComparator,
    MoneyComparator,
    NumberComparator,
    StringComparator,
)
from item_sorter.domain.errors import NotFoundError
from item_sorter.parsers import JsonParser

JSON_PARSER = "jsonParser"
BASE_SORTER = "baseSorter"
NUMBER_SORTER = "numberSorter"
STRING_SORTER = "stringSorter"
MONEY_SORTER = "moneySorter"
DATE_SORTER = "dateSorter"


class ServiceRegistry:
    """Map service names to shared instances."""

    def __init__(self) -> None:
        self._services: Dict[str, Any] = {}

    def set(self, name: str, instance: Any) -> None:
        self._services[name] = instance

    def get(self, name: str) -> Any:
        if name not in self._services:
            raise NotFoundError(
                f"Service key name {name!r} not found. Available: {', '.join(self.names())}"
            )
        return self._services[name]

    def delete(self, name: str) -> None:
        self._services.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._services)

    def __contains__(self, name: object) -> bool:
        return name in self._services


def _default_factories() -> Dict[str, Callable[[], Any]]:
    """Standard services keyed by name."""
    return {
        JSON_PARSER: lambda: JsonParser(JsonParser.FORMAT_JSON),
        BASE_SORTER: lambda: BaseComparator(),
        NUMBER_SORTER: lambda: NumberComparator(),
        STRING_SORTER: lambda: StringComparator(),
        MONEY_SORTER: lambda: MoneyComparator(),
        DATE_SORTER: lambda: DateComparator(),
    }


def build_default_registry() -> ServiceRegistry:
    registry = ServiceRegistry()
    for name, factory in _default_factories().items():
        registry.set(name, factory())
    return registry


__all__ = [
    "ServiceRegistry",
    "build_default_registry",
    "JSON_PARSER",
    "BASE_SORTER",
    "NUMBER_SORTER",
    "STRING_SORTER",
    "MONEY_SORTER",
    "DATE_SORTER",
]
