"""
Sample data generation and loading script for item-sorter.

Writes a deterministic pseudo-random JSON array of items (`ID`, `Color`,
`Cost`, `Date`) and optionally upserts it into the Postgres documents table so
the `from-db` command has something to select.
"""

from __future__ import annotations

import json
import random
import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import psycopg
import typer
from psycopg import sql

from item_sorter.infrastructure.db_factory import build_dsn

app = typer.Typer(help="Generate sample items as JSON and optionally load them into Postgres.")

COLORS = ["red", "green", "blue", "yellow", "black", "white"]
START_DATE = date(2021, 1, 1)


def _build_dsn(dsn_override: str | None) -> str:
    if dsn_override:
        return dsn_override
    return build_dsn()


def _generate_items(rows: int, seed: int) -> list[dict[str, Any]]:
    rng = random.Random(seed)
    ids = list(range(1, rows + 1))
    rng.shuffle(ids)

    items: list[dict[str, Any]] = []
    for item_id in ids:
        cost = round(rng.uniform(1, 1_000), rng.choice([1, 2]))
        items.append(
            {
                "ID": item_id,
                "Color": rng.choice(COLORS),
                "Cost": f"{cost}",
                "Date": (START_DATE + timedelta(days=rng.randint(0, 365))).isoformat(),
            }
        )
    return items


def _write_json(json_path: Path, items: list[dict[str, Any]]) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(items, f, indent=2)
        f.write("\n")


def _upsert_into_db(dsn: str, table: str, name: str, body: str) -> None:
    with psycopg.connect(dsn) as conn:
        with conn.cursor() as cur:
            cur.execute(
                sql.SQL(
                    "INSERT INTO {} (name, body) VALUES (%s, %s) "
                    "ON CONFLICT (name) DO UPDATE SET body = EXCLUDED.body"
                ).format(sql.Identifier(table)),
                (name, body),
            )
        conn.commit()


@app.command()
def main(
    rows: int = typer.Option(
        10,
        "--rows",
        "-r",
        help="Number of items to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/data.json"),
        "--output",
        "-o",
        help="JSON output path.",
    ),
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
    table: str = typer.Option(
        "item_documents",
        "--table",
        help="Documents table to upsert into.",
    ),
    name: str = typer.Option(
        "data.json",
        "--name",
        help="Document name used as the database resource path.",
    ),
    no_load: bool = typer.Option(
        False,
        "--no-load",
        help="Only write the JSON file; skip loading into Postgres.",
    ),
) -> None:
    """
    Generate sample items and optionally load them into Postgres.
    """
    items = _generate_items(rows, seed)
    _write_json(output, items)
    typer.echo(f"Wrote {len(items)} items -> {output} (seed={seed})")

    if no_load:
        typer.echo("Skipping load (no-load flag set).")
        return

    _upsert_into_db(_build_dsn(dsn), table, name, output.read_text(encoding="utf-8"))
    typer.echo(f"Upserted document {name!r} into table {table!r}.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
