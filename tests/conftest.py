"""Test fixtures for roommates tests."""

import os
import sys
import types

# Set ENVIRONMENT before importing any modules that read settings
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from roommates.db import ConnectionProvider, ensure_schema


class FakeCursor:
    """DB-API cursor double that records statements and serves canned rows."""

    def __init__(self, rows=(), description=()):
        self.rows = list(rows)
        self.description = [(name,) for name in description]
        self.executed = []
        self.lastrowid = None
        self.rowcount = 0
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((sql, tuple(params)))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return list(self.rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor=None):
        self.cursor_obj = cursor or FakeCursor()
        self.commits = 0
        self.closed = False

    def cursor(self):
        return self.cursor_obj

    def commit(self):
        self.commits += 1

    def close(self):
        self.closed = True


@pytest.fixture
def fake_connection():
    return FakeConnection()


@pytest.fixture
def use_fake_connection(monkeypatch, fake_connection):
    """Make every ConnectionProvider.connect() return the fake connection."""
    monkeypatch.setattr(ConnectionProvider, "connect", lambda self: fake_connection)
    return fake_connection


@pytest.fixture
def fake_psycopg2(monkeypatch, fake_connection):
    """Stand-in psycopg2 module; returns the DSNs it was asked to connect to."""
    dsns = []

    def _connect(dsn):
        dsns.append(dsn)
        return fake_connection

    monkeypatch.setitem(sys.modules, "psycopg2", types.SimpleNamespace(connect=_connect))
    return dsns


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables for testing."""
    for var in ["ENVIRONMENT", "DATABASE_URL", "ROOMMATES_DB", "LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def test_db_path(tmp_path):
    """Provide a temporary database path."""
    return str(tmp_path / "roommates.db")


@pytest.fixture
def provider(test_db_path):
    """Connection provider over a fresh SQLite database with the schema."""
    provider = ConnectionProvider(test_db_path)
    ensure_schema(provider)
    return provider


@pytest.fixture
def seeded_provider(provider):
    """Two rooms and three roommates."""
    con = provider.connect()
    try:
        con.executemany(
            "INSERT INTO Room (Id, Name, MaxOccupancy) VALUES (?, ?, ?)",
            [(1, "Bedroom", 2), (2, "Attic", 1)],
        )
        con.executemany(
            "INSERT INTO Roommate (Id, FirstName, LastName, RentPortion, MoveInDate, RoomId) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            [
                (1, "Jenna", "Solis", 40, "2021-01-15T00:00:00", 1),
                (2, "Walter", "Blue", 35, "2021-03-01T00:00:00", 1),
                (3, "Ada", "Lovelace", 25, "2022-06-30T12:30:00", 2),
            ],
        )
        con.commit()
    finally:
        con.close()
    return provider
