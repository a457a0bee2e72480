"""
Natural-order comparators: values that Python already orders with `<`.

NumberComparator and DateComparator share BaseComparator and differ only in
the value type they accept.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TypeVar, Union

from item_sorter.comparators.abstract import AbstractComparator

Number = Union[int, float, Decimal]
N = TypeVar("N")


class BaseComparator(AbstractComparator[N]):
    """Orders any two mutually comparable values by `<` and `==`."""

    name: str = "base"
    description: str = "Natural ordering of mutually comparable values."

    def _order(self, item1: N, item2: N) -> int:
        if item1 == item2:
            return 0
        return 1 if item1 > item2 else -1  # type: ignore[operator]


class NumberComparator(BaseComparator[Number]):
    name: str = "number"
    description: str = "Numeric ordering of integers and decimals."


class DateComparator(BaseComparator[date]):
    name: str = "date"
    description: str = "Chronological ordering of calendar dates."


__all__ = ["BaseComparator", "NumberComparator", "DateComparator", "Number"]
