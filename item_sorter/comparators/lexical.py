"""
Lexical comparators: strings ordered by code point.

MoneyComparator is deliberately the string comparator under another name.
Costs are compared as raw text, currency-insensitive, so "9.5" sorts after
"10.0". Do not switch it to numeric comparison; stored orderings depend on it.
"""

from __future__ import annotations

from item_sorter.comparators.abstract import AbstractComparator


class StringComparator(AbstractComparator[str]):
    name: str = "string"
    description: str = "Code point ordering of strings."

    def _order(self, item1: str, item2: str) -> int:
        if item1 == item2:
            return 0
        return -1 if item1 < item2 else 1


class MoneyComparator(StringComparator):
    # currency insensitive
    name: str = "money"
    description: str = "Costs compared as text, currency-insensitive."


__all__ = ["StringComparator", "MoneyComparator"]
