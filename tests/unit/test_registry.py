from __future__ import annotations

import pytest

from item_sorter.comparators import (
    BaseComparator,
    DateComparator,
    MoneyComparator,
    NumberComparator,
    StringComparator,
)
from item_sorter.domain.errors import NotFoundError
from item_sorter.parsers import JsonParser
from item_sorter.registry import ServiceRegistry, build_default_registry


def test_default_registry_contains_known_services() -> None:
    registry = build_default_registry()

    assert registry.names() == sorted(
        ["jsonParser", "baseSorter", "numberSorter", "stringSorter", "moneySorter", "dateSorter"]
    )
    assert isinstance(registry.get("jsonParser"), JsonParser)
    assert type(registry.get("baseSorter")) is BaseComparator
    assert isinstance(registry.get("numberSorter"), NumberComparator)
    assert type(registry.get("stringSorter")) is StringComparator
    assert isinstance(registry.get("moneySorter"), MoneyComparator)
    assert isinstance(registry.get("dateSorter"), DateComparator)


def test_get_returns_the_shared_instance() -> None:
    registry = build_default_registry()

    assert registry.get("numberSorter") is registry.get("numberSorter")


def test_registries_are_independent() -> None:
    first, second = build_default_registry(), build_default_registry()
    first.delete("dateSorter")

    assert "dateSorter" not in first
    assert "dateSorter" in second


def test_set_get_delete_round_trip() -> None:
    registry = ServiceRegistry()
    service = object()

    registry.set("custom", service)
    assert registry.get("custom") is service

    registry.delete("custom")
    with pytest.raises(NotFoundError):
        registry.get("custom")


def test_delete_missing_name_is_silent() -> None:
    registry = ServiceRegistry()

    registry.delete("never-set")

    assert registry.names() == []


def test_missing_name_error_is_a_key_error() -> None:
    with pytest.raises(KeyError, match="nope"):
        ServiceRegistry().get("nope")
