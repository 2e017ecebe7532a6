"""
Connection Provider

Opens a fresh database connection per call from a single connection string.

Supports both:
- PostgreSQL: ``postgresql://...`` or ``postgres://...`` DSNs (psycopg2)
- SQLite: ``sqlite:///path`` or a bare file path

Private SQLite databases (``:memory:`` or an empty path) are rejected, since
they would not outlive the connection that created them.
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from roommates.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

_POSTGRES_PREFIXES = ("postgresql://", "postgres://")
_SQLITE_PREFIX = "sqlite://"
_PRIVATE_SQLITE_PATHS = ("", ":memory:")


def sqlite_path(connection_string: str) -> str:
    """Strip an optional ``sqlite://`` scheme, leaving the file path."""
    if connection_string.startswith(_SQLITE_PREFIX):
        path = connection_string[len(_SQLITE_PREFIX):]
        # sqlite:///relative.db -> relative.db, sqlite:////abs.db -> /abs.db
        return path[1:] if path.startswith("/") else path
    return connection_string


@dataclass(frozen=True)
class ConnectionProvider:
    connection_string: str

    def __post_init__(self):
        if self.is_postgres:
            return
        if sqlite_path(self.connection_string) in _PRIVATE_SQLITE_PATHS:
            raise ConfigurationError(
                f"SQLite database '{self.connection_string}' is private to a single "
                "connection; use a file path instead."
            )

    @property
    def is_postgres(self) -> bool:
        return self.connection_string.startswith(_POSTGRES_PREFIXES)

    @property
    def placeholder(self) -> str:
        """Return parameter placeholder for the current database driver."""
        return "%s" if self.is_postgres else "?"

    def connect(self) -> Any:
        """Open a new connection. The caller must close it."""
        if self.is_postgres:
            import psycopg2

            logger.debug("Opening PostgreSQL connection")
            return psycopg2.connect(self.connection_string)

        path = sqlite_path(self.connection_string)
        logger.debug("Opening SQLite connection to %s", path)
        con = sqlite3.connect(path)
        con.execute("PRAGMA foreign_keys = ON")
        return con

    @contextmanager
    def cursor(self) -> Iterator[tuple[Any, Any]]:
        """Yield a DB connection and cursor, always closing both."""
        conn = self.connect()
        try:
            cursor = conn.cursor()
        except Exception:
            conn.close()
            raise
        try:
            yield conn, cursor
        finally:
            try:
                cursor.close()
            finally:
                conn.close()
