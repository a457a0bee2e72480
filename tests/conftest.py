"""
Pytest configuration for item-sorter.

Provides fixtures for:
- Sample decoded items and records
- Populated storages
- Settings overrides and cache isolation
- Database connection management for integration tests
"""

from __future__ import annotations

import json
import os
from datetime import date
from pathlib import Path
from typing import Any, Dict, Generator, List

import psycopg
import pytest

from item_sorter.config import Settings, get_settings
from item_sorter.domain.models import Record
from item_sorter.storage import ItemDataStorage


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so env overrides in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def decoded_items() -> List[Dict[str, Any]]:
    """Three decoded items in the shape the JSON parser emits."""
    return [
        {"id": 2, "color": "red", "cost": "9.5", "date": "2021-01-02"},
        {"id": 1, "color": "blue", "cost": "10.0", "date": "2021-01-01"},
        {"id": 3, "color": "green", "cost": "2.0", "date": "2021-01-03"},
    ]


@pytest.fixture
def records() -> List[Record]:
    return [
        Record(id=2, color="red", cost="9.5", date=date(2021, 1, 2)),
        Record(id=1, color="blue", cost="10.0", date=date(2021, 1, 1)),
        Record(id=3, color="green", cost="2.0", date=date(2021, 1, 3)),
    ]


@pytest.fixture
def storage(records: List[Record]) -> ItemDataStorage:
    """Storage populated with `records` in insertion order."""
    populated = ItemDataStorage()
    for record in records:
        populated.add(record)
    return populated


@pytest.fixture
def json_file(tmp_path: Path, decoded_items: List[Dict[str, Any]]) -> Path:
    """The decoded items written as a JSON file with capitalised keys."""
    keys = {"id": "ID", "color": "Color", "cost": "Cost", "date": "Date"}
    payload = [{keys[key]: value for key, value in item.items()} for item in decoded_items]
    path = tmp_path / "data.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "postgres"),
        db_name=os.getenv("DB_NAME", "item_sorter"),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def test_dsn(test_settings: Settings) -> str:
    """
    Database connection string for tests.
    """
    return (
        f"postgresql://{test_settings.db_user}:{test_settings.db_password}"
        f"@{test_settings.db_host}:{test_settings.db_port}/{test_settings.db_name}"
    )


@pytest.fixture(scope="session")
def db_connection_available(test_dsn: str) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_dsn, connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def db_connection(
    test_dsn: str, db_connection_available: bool
) -> Generator[psycopg.Connection, None, None]:
    """
    Provide a session-scoped database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = psycopg.connect(test_dsn)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="session")
def db_schema_initialized(db_connection: psycopg.Connection) -> bool:
    """
    Ensure the documents table exists by running db/init.sql.
    """
    init_sql_path = Path(__file__).parent.parent / "db" / "init.sql"
    with db_connection.cursor() as cur:
        cur.execute(init_sql_path.read_text(encoding="utf-8"))
    db_connection.commit()
    return True


@pytest.fixture(scope="function")
def clean_documents_table(db_connection: psycopg.Connection, db_schema_initialized: bool):
    """
    Clean the documents table before and after each test function.
    """
    with db_connection.cursor() as cur:
        cur.execute("TRUNCATE TABLE public.item_documents;")
    db_connection.commit()
    yield
    with db_connection.cursor() as cur:
        cur.execute("TRUNCATE TABLE public.item_documents;")
    db_connection.commit()
