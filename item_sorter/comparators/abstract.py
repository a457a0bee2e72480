"""
Abstract comparator interfaces for item-sorter.

A comparator orders two field values of a single declared type and honours a
direction flag. Concrete comparators (numeric, lexical, currency, date) should
implement the Comparator protocol, optionally via the AbstractComparator ABC,
so storage can sort with any of them interchangeably.
"""

from __future__ import annotations

import abc
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@runtime_checkable
class Comparator(Protocol[T_contra]):
    """
    Common interface all comparators must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the ordering.
    """

    name: str
    description: str

    def compare(self, item1: T_contra, item2: T_contra, ascending: bool = True) -> int:
        """
        Order two values.

        Parameters
        ----------
        item1, item2 : T
            Field values of the same type.
        ascending : bool
            When False the result sign is inverted.

        Returns
        -------
        int
            -1, 0 or 1.
        """
        ...


class AbstractComparator(abc.ABC, Generic[T]):
    """
    ABC helper for class-based comparators.

    Subclasses set `name` and `description` and implement `_order`, which
    compares in ascending direction; `compare` applies the direction flag.
    """

    name: str
    description: str

    def compare(self, item1: T, item2: T, ascending: bool = True) -> int:
        result = _sign(self._order(item1, item2))
        return result if ascending else -result

    @abc.abstractmethod
    def _order(self, item1: T, item2: T) -> int:  # pragma: no cover - interface only
        """Return a negative, zero or positive number in ascending direction."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def describe(comparator: Any) -> str:
    """Short label for logs, tolerant of duck-typed comparators."""
    return getattr(comparator, "name", type(comparator).__name__)


__all__ = [
    "Comparator",
    "AbstractComparator",
    "describe",
]
