"""
Low-level resource loaders: fetch the raw bytes a Resource points at.

FileAsStringResourceLoader reads local paths and `file://` URLs from disk and
fetches `http(s)://` URLs with httpx. DbItemResourceLoader selects a stored
JSON document from Postgres by name. Every failure surfaces as a
ResourceIOError; nothing is retried.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import unquote, urlparse

import httpx
import psycopg
from psycopg import sql

from item_sorter.config import get_settings
from item_sorter.domain.errors import ResourceIOError
from item_sorter.domain.models import Resource
from item_sorter.infrastructure.db_factory import get_sync_connection
from item_sorter.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class ResourceLoader(Protocol):
    """Capability shared by resource loaders."""

    def set_resource(self, resource: Resource) -> None: ...

    def load(self) -> bytes: ...


class BaseResourceLoader:
    """Holds the resource a loader reads from."""

    def __init__(self, resource: Optional[Resource] = None) -> None:
        self._resource = resource

    @property
    def resource(self) -> Resource:
        if self._resource is None:
            raise ResourceIOError(f"{type(self).__name__} has no resource set")
        return self._resource

    def set_resource(self, resource: Resource) -> None:
        self._resource = resource


class FileAsStringResourceLoader(BaseResourceLoader):
    """Read a resource from disk, or over HTTP when its path is a URL."""

    def __init__(
        self,
        resource: Optional[Resource] = None,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        super().__init__(resource)
        self._client = client
        self._timeout = timeout

    def load(self) -> bytes:
        path = self.resource.path
        scheme = urlparse(path).scheme.lower()
        if scheme in ("http", "https"):
            return self._fetch_url(path)
        if scheme == "file":
            return self._read_file(Path(unquote(urlparse(path).path)))
        return self._read_file(Path(path))

    def _read_file(self, path: Path) -> bytes:
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise ResourceIOError(f"Cannot read {path}: {exc}") from exc
        log.info("Resource read from file", extra={"path": str(path), "bytes": len(content)})
        return content

    def _fetch_url(self, url: str) -> bytes:
        close_client = False
        client = self._client
        if client is None:
            timeout = self._timeout
            if timeout is None:
                timeout = get_settings().http_timeout_seconds
            client = httpx.Client(timeout=timeout)
            close_client = True
        try:
            resp = client.get(url)
            resp.raise_for_status()
            content = resp.content
        except httpx.HTTPError as exc:
            raise ResourceIOError(f"Cannot fetch {url}: {exc}") from exc
        finally:
            if close_client:
                client.close()
        log.info("Resource fetched over HTTP", extra={"url": url, "bytes": len(content)})
        return content


class DbItemResourceLoader(BaseResourceLoader):
    """
    Select a JSON document from the Postgres documents table.

    The resource path is the document name (the `name` column); the document
    body is returned as UTF-8 bytes.
    """

    def __init__(
        self,
        resource: Optional[Resource] = None,
        dsn_override: Optional[str] = None,
        table: Optional[str] = None,
    ) -> None:
        super().__init__(resource)
        self._dsn_override = dsn_override
        self._table = table

    def load(self) -> bytes:
        name = self.resource.path
        table = self._table or get_settings().db_documents_table
        query = sql.SQL("SELECT body FROM {} WHERE name = %s").format(sql.Identifier(table))

        try:
            conn = get_sync_connection(self._dsn_override)
            try:
                with conn.cursor() as cur:
                    cur.execute(query, (name,))
                    row = cur.fetchone()
            finally:
                conn.close()
        except psycopg.Error as exc:
            raise ResourceIOError(f"Cannot select document {name!r}: {exc}") from exc

        if row is None:
            raise ResourceIOError(f"Document {name!r} not found in table {table!r}")

        body = row[0]
        if isinstance(body, (bytes, bytearray, memoryview)):
            content = bytes(body)
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            # json/jsonb columns arrive already decoded
            content = json.dumps(body).encode("utf-8")
        log.info(
            "Resource selected from database",
            extra={"document": name, "table": table, "bytes": len(content)},
        )
        return content


__all__ = [
    "ResourceLoader",
    "BaseResourceLoader",
    "FileAsStringResourceLoader",
    "DbItemResourceLoader",
]
