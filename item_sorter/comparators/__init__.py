"""
Comparators package for item-sorter.

Re-exports the abstract interfaces and the concrete comparators so downstream
code can import from `item_sorter.comparators` directly.
"""

from item_sorter.comparators.abstract import AbstractComparator, Comparator
from item_sorter.comparators.lexical import MoneyComparator, StringComparator
from item_sorter.comparators.natural import BaseComparator, DateComparator, NumberComparator

__all__ = [
    # Abstracts
    "AbstractComparator",
    "Comparator",
    # Concrete comparators
    "BaseComparator",
    "NumberComparator",
    "DateComparator",
    "StringComparator",
    "MoneyComparator",
]
