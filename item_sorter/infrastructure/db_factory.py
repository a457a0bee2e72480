"""
Database connection factory utilities for item-sorter.

Composes the Postgres DSN from settings and opens plain psycopg connections.
Connection failures are not retried: they propagate to the caller.
"""

from __future__ import annotations

from typing import Optional

import psycopg
from psycopg import Connection

from item_sorter.config import Settings, get_settings


def build_dsn(settings: Optional[Settings] = None) -> str:
    """Compose a DSN string from settings."""
    settings = settings or get_settings()
    return (
        f"postgresql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
    )


def get_sync_connection(dsn: Optional[str] = None) -> Connection:
    """
    Acquire a dedicated synchronous connection.

    Parameters
    ----------
    dsn : str | None
        Optional DSN override; defaults to the one built from settings.

    Raises
    ------
    psycopg.OperationalError
        If the server cannot be reached.
    """
    return psycopg.connect(dsn or build_dsn())


__all__ = ["build_dsn", "get_sync_connection"]
