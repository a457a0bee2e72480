"""
Rich table rendering of a storage's records, one row per record with a caption.
"""

from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from item_sorter.domain.models import Record
from item_sorter.storage import DataStorage


def build_table(storage: DataStorage, caption: str = "") -> Table:
    """
    Build a rich table with one row per stored record, in storage order.
    """
    table = Table(
        box=box.ROUNDED,
        caption=caption or None,
    )

    table.add_column("#", justify="right", style="dim", no_wrap=True)
    for name in Record.field_names():
        table.add_column(name, justify="right" if name == "id" else "left")

    for index, record in storage.get_all():
        row = record.as_row()
        table.add_row(str(index), *(row[name] for name in Record.field_names()))

    return table


class ItemTableView:
    """
    Render storages as tables on a rich console.

    Pass `record=True` (or a recording console) to keep rendered output so it
    can be exported as HTML afterwards.
    """

    def __init__(self, console: Optional[Console] = None, record: bool = False) -> None:
        self.console = console or Console(record=record)

    def render(self, storage: DataStorage, caption: str = "") -> Table:
        table = build_table(storage, caption)
        self.console.print(table)
        return table

    def export_html(self) -> str:
        return self.console.export_html()


__all__ = ["ItemTableView", "build_table"]
