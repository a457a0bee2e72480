"""
Controller actions: load a resource, then render it in five orders.

Each action runs one synchronous pass: populate a fresh storage, render the
original order, then sort by color, id, cost and date with the matching
comparator from the registry, rendering after every sort. Any error aborts the
pass and propagates to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, NamedTuple, Optional

from item_sorter.config import Settings, get_settings
from item_sorter.domain.errors import ResourceIOError
from item_sorter.domain.models import JsonResource, Resource
from item_sorter.infrastructure.resource_loaders import (
    DbItemResourceLoader,
    FileAsStringResourceLoader,
    ResourceLoader,
)
from item_sorter.loader import ItemDataLoader
from item_sorter.registry import (
    BASE_SORTER,
    DATE_SORTER,
    JSON_PARSER,
    MONEY_SORTER,
    NUMBER_SORTER,
    STRING_SORTER,
    ServiceRegistry,
)
from item_sorter.storage import ItemDataStorage
from item_sorter.utils.logging import get_logger
from item_sorter.views import ItemTableView

log = get_logger(__name__)


class SortStep(NamedTuple):
    sorter: str
    field: str
    ascending: bool
    caption: str


INDEX_STEPS: List[SortStep] = [
    SortStep(STRING_SORTER, "color", False, "data sorted by color <"),
    SortStep(NUMBER_SORTER, "id", True, "data sorted by id"),
    SortStep(MONEY_SORTER, "cost", False, "data sorted by cost <"),
    SortStep(DATE_SORTER, "date", False, "data sorted by date <"),
]

FROM_DB_STEPS: List[SortStep] = [
    SortStep(STRING_SORTER, "color", True, "DB data sorted by color"),
    SortStep(NUMBER_SORTER, "id", True, "DB data sorted by id"),
    SortStep(MONEY_SORTER, "cost", False, "DB data sorted by cost <"),
    SortStep(DATE_SORTER, "date", False, "DB data sorted by date <"),
]


class SiteController:
    """Entry-point actions shared by the CLI commands."""

    def __init__(
        self,
        registry: ServiceRegistry,
        settings: Optional[Settings] = None,
        view: Optional[ItemTableView] = None,
    ) -> None:
        self._registry = registry
        self._settings = settings or get_settings()
        self._view = view or ItemTableView(record=self._settings.output_format == "html")

    @property
    def view(self) -> ItemTableView:
        return self._view

    def index(self) -> List[str]:
        """Load the primary (file or URL) resource and render its five views."""
        resource = JsonResource(self._settings.primary_resource)
        resource_loader = FileAsStringResourceLoader(
            timeout=self._settings.http_timeout_seconds
        )
        return self._run(resource, resource_loader, "original data", INDEX_STEPS)

    def from_db(self) -> List[str]:
        """Load the database resource and render its five views."""
        resource = JsonResource(self._settings.db_resource)
        resource_loader = DbItemResourceLoader(table=self._settings.db_documents_table)
        return self._run(resource, resource_loader, "DB original data", FROM_DB_STEPS)

    def _run(
        self,
        resource: Resource,
        resource_loader: ResourceLoader,
        original_caption: str,
        steps: List[SortStep],
    ) -> List[str]:
        storage = ItemDataStorage()
        storage.set_comparator(self._registry.get(BASE_SORTER))

        loader = ItemDataLoader(resource, resource_loader, self._registry.get(JSON_PARSER), storage)
        loader.load()

        captions = [original_caption]
        self._view.render(storage, original_caption)

        for step in steps:
            storage.set_comparator(self._registry.get(step.sorter))
            storage.sort(step.field, step.ascending)
            self._view.render(storage, step.caption)
            captions.append(step.caption)

        if self._settings.output_format == "html":
            self._write_html(Path(self._settings.html_output))

        log.info(
            "Views rendered",
            extra={"resource": resource.path, "views": len(captions), "records": len(storage)},
        )
        return captions

    def _write_html(self, path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write(self._view.export_html())
        except OSError as exc:
            raise ResourceIOError(f"Cannot write {path}: {exc}") from exc
        log.info("HTML output written", extra={"path": str(path)})


__all__ = ["SiteController", "SortStep", "INDEX_STEPS", "FROM_DB_STEPS"]
