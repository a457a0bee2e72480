from __future__ import annotations

import sys
from typing import Callable, List

import typer

from item_sorter.config import get_settings
from item_sorter.controller import SiteController
from item_sorter.domain.errors import ItemSorterError
from item_sorter.registry import build_default_registry
from item_sorter.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Load item records, sort them by field and render them as tables.")

log = get_logger(__name__)


def _run_action(action: Callable[[SiteController], List[str]]) -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    controller = SiteController(build_default_registry(), settings=settings)
    try:
        captions = action(controller)
    except ItemSorterError as exc:
        log.exception("Action failed", extra={"error_type": type(exc).__name__})
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if settings.output_format == "html":
        typer.echo(f"Rendered {len(captions)} views to {settings.html_output}")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"primary={settings.primary_resource} | "
        f"DB={settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name} "
        f"table={settings.db_documents_table} document={settings.db_resource} | "
        f"output={settings.output_format}"
    )


@app.command()
def index() -> None:
    """
    Load the primary resource and render original, color, id, cost and date views.
    """
    _run_action(lambda controller: controller.index())


@app.command("from-db")
def from_db() -> None:
    """
    Load the database resource and render the same five views.
    """
    _run_action(lambda controller: controller.from_db())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
