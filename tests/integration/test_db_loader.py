"""
Integration tests for the database resource loader.

These run against a real PostgreSQL instance and are skipped when none is
reachable (see the `db_connection` fixture).
"""

from __future__ import annotations

from pathlib import Path

import psycopg
import pytest

from item_sorter.comparators import NumberComparator
from item_sorter.domain.errors import ResourceIOError
from item_sorter.domain.models import JsonResource
from item_sorter.infrastructure.resource_loaders import DbItemResourceLoader
from item_sorter.loader import ItemDataLoader
from item_sorter.parsers import JsonParser
from item_sorter.storage import ItemDataStorage
from scripts.generate_data import _upsert_into_db

DOCUMENT_NAME = "data.json"
TABLE = "item_documents"
EXPECTED_RECORDS = 3


class TestDbItemResourceLoader:
    """Select JSON documents from Postgres and load them into storage."""

    def test_loads_upserted_document(
        self, db_connection: psycopg.Connection, clean_documents_table, test_dsn: str,
        json_file: Path,
    ):
        _upsert_into_db(test_dsn, TABLE, DOCUMENT_NAME, json_file.read_text(encoding="utf-8"))
        storage = ItemDataStorage(NumberComparator())
        loader = ItemDataLoader(
            JsonResource(DOCUMENT_NAME),
            DbItemResourceLoader(dsn_override=test_dsn, table=TABLE),
            JsonParser(),
            storage,
        )

        assert loader.load() == EXPECTED_RECORDS
        storage.sort("id")
        assert [record.id for _, record in storage.get_all()] == [1, 2, 3]

    def test_upsert_replaces_existing_document(
        self, db_connection: psycopg.Connection, clean_documents_table, test_dsn: str
    ):
        _upsert_into_db(test_dsn, TABLE, DOCUMENT_NAME, "[]")
        _upsert_into_db(test_dsn, TABLE, DOCUMENT_NAME, '[{"ID": 1}]')

        loader = DbItemResourceLoader(JsonResource(DOCUMENT_NAME), dsn_override=test_dsn, table=TABLE)

        assert loader.load() == b'[{"ID": 1}]'

    def test_missing_document_raises(
        self, db_connection: psycopg.Connection, clean_documents_table, test_dsn: str
    ):
        loader = DbItemResourceLoader(JsonResource("absent"), dsn_override=test_dsn, table=TABLE)

        with pytest.raises(ResourceIOError):
            loader.load()
