"""
Index-addressable, sortable in-memory storage for item records.

Storage keeps records under integer indices in insertion order. A comparator
injected with `set_comparator` drives `sort`, which reorders the whole
collection by one field and renumbers indices densely from zero. Every record
also carries a hidden insertion sequence number so `reset_sort` can restore the
original order deterministically.

Storage is not thread-safe. Callers sharing one instance across threads must
hold a single lock around each full operation.
"""

from __future__ import annotations

import functools
from typing import Any, Dict, Iterator, NamedTuple, Optional, Protocol, Tuple, runtime_checkable

from item_sorter.comparators.abstract import Comparator, describe
from item_sorter.domain.errors import InvalidFieldError, NoComparatorError, NotFoundError
from item_sorter.domain.models import Record
from item_sorter.utils.logging import get_logger

log = get_logger(__name__)


class SortState(NamedTuple):
    """Field and direction of the last successful sort."""

    field: str
    ascending: bool


class _Slot(NamedTuple):
    seq: int
    record: Record


@runtime_checkable
class DataStorage(Protocol):
    """Capability shared by record storages."""

    def set_comparator(self, comparator: Optional[Comparator[Any]] = None) -> None: ...

    def add(self, record: Record) -> None: ...

    def set(self, index: int, record: Record) -> None: ...

    def get(self, index: int) -> Record: ...

    def get_all(self) -> Iterator[Tuple[int, Record]]: ...

    def delete(self, index: int) -> None: ...

    def sort(self, field_name: str, ascending: bool = True) -> None: ...

    def reset_sort(self) -> None: ...


class ItemDataStorage:
    """
    Ordered storage of `Record` items.

    Indices behave like a PHP-style ordered map: `add` appends at one past the
    highest index ever assigned, `set` overwrites in place or appends a new
    index, and `delete` leaves the remaining indices untouched.
    """

    def __init__(self, comparator: Optional[Comparator[Any]] = None) -> None:
        self._data: Dict[int, _Slot] = {}
        self._comparator = comparator
        self._next_index = 0
        self._next_seq = 0
        self._sort_state: Optional[SortState] = None

    # ------------------------------------------------------------------
    # Comparator
    # ------------------------------------------------------------------
    @property
    def comparator(self) -> Optional[Comparator[Any]]:
        return self._comparator

    def set_comparator(self, comparator: Optional[Comparator[Any]] = None) -> None:
        """Replace the active comparator; `None` clears it."""
        self._comparator = comparator

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def add(self, record: Record) -> None:
        self._data[self._next_index] = self._slot(record)
        self._next_index += 1
        self._sort_state = None

    def set(self, index: int, record: Record) -> None:
        self._data[index] = self._slot(record)
        if index >= self._next_index:
            self._next_index = index + 1
        self._sort_state = None

    def get(self, index: int) -> Record:
        try:
            return self._data[index].record
        except KeyError:
            raise NotFoundError(f"Key {index} not found") from None

    def get_all(self) -> Iterator[Tuple[int, Record]]:
        """
        Yield `(index, record)` pairs in current storage order.

        The pairs are captured when iteration starts, so mutating storage while
        iterating does not affect a running iteration. Each call returns a new
        generator reflecting the state at the time it is first advanced.
        """
        snapshot = [(index, slot.record) for index, slot in self._data.items()]
        yield from snapshot

    def delete(self, index: int) -> None:
        """Remove `index` if present; a missing index is silently ignored."""
        self._data.pop(index, None)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, index: object) -> bool:
        return index in self._data

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    @property
    def sort_state(self) -> Optional[SortState]:
        """Last sort applied, or None while records are in insertion order."""
        return self._sort_state

    def sort(self, field_name: str, ascending: bool = True) -> None:
        """
        Stable in-place reorder of all records by `field_name`.

        Raises
        ------
        NoComparatorError
            If no comparator is set.
        InvalidFieldError
            If any stored record lacks `field_name`.
        """
        comparator = self._comparator
        if comparator is None:
            raise NoComparatorError("Sorter algo is absent")

        for slot in self._data.values():
            if field_name not in type(slot.record).model_fields:
                raise InvalidFieldError(f"Invalid field name for sorting: {field_name!r}")

        def _cmp(left: _Slot, right: _Slot) -> int:
            return comparator.compare(
                getattr(left.record, field_name),
                getattr(right.record, field_name),
                ascending,
            )

        ordered = sorted(self._data.values(), key=functools.cmp_to_key(_cmp))
        self._renumber(ordered)
        self._sort_state = SortState(field_name, ascending)
        log.debug(
            "Storage sorted",
            extra={
                "field": field_name,
                "ascending": ascending,
                "comparator": describe(comparator),
                "records": len(ordered),
            },
        )

    def reset_sort(self) -> None:
        """Restore insertion order and renumber indices from zero."""
        ordered = sorted(self._data.values(), key=lambda slot: slot.seq)
        self._renumber(ordered)
        self._sort_state = None
        log.debug("Storage sort reset", extra={"records": len(ordered)})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _slot(self, record: Record) -> _Slot:
        slot = _Slot(self._next_seq, record)
        self._next_seq += 1
        return slot

    def _renumber(self, ordered: list[_Slot]) -> None:
        self._data = dict(enumerate(ordered))
        self._next_index = len(ordered)


__all__ = ["DataStorage", "ItemDataStorage", "SortState"]
