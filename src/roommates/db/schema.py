"""
Room / Roommate schema

Table definitions for local development and tests. Production databases
are expected to be provisioned already; these statements are idempotent.
"""

import logging
from pathlib import Path

from roommates.db.connection import ConnectionProvider, sqlite_path

logger = logging.getLogger(__name__)

SCHEMA_PG = """
CREATE TABLE IF NOT EXISTS Room (
  Id SERIAL PRIMARY KEY,
  Name TEXT NOT NULL,
  MaxOccupancy INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS Roommate (
  Id SERIAL PRIMARY KEY,
  FirstName TEXT NOT NULL,
  LastName TEXT NOT NULL,
  RentPortion INTEGER NOT NULL,
  MoveInDate TIMESTAMP NOT NULL,
  RoomId INTEGER NOT NULL REFERENCES Room(Id)
);
CREATE INDEX IF NOT EXISTS idx_roommate_room ON Roommate(RoomId);
"""

SCHEMA_SQLITE = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS Room (
  Id INTEGER PRIMARY KEY AUTOINCREMENT,
  Name TEXT NOT NULL,
  MaxOccupancy INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS Roommate (
  Id INTEGER PRIMARY KEY AUTOINCREMENT,
  FirstName TEXT NOT NULL,
  LastName TEXT NOT NULL,
  RentPortion INTEGER NOT NULL,
  MoveInDate TEXT NOT NULL,
  RoomId INTEGER NOT NULL REFERENCES Room(Id)
);
CREATE INDEX IF NOT EXISTS idx_roommate_room ON Roommate(RoomId);
"""


def ensure_schema(provider: ConnectionProvider) -> None:
    """Create the Room and Roommate tables if they do not exist."""
    postgres_mode = provider.is_postgres

    if not postgres_mode:
        path = sqlite_path(provider.connection_string)
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    con = provider.connect()
    try:
        if postgres_mode:
            cur = con.cursor()
            try:
                for stmt in SCHEMA_PG.split(";"):
                    stmt = stmt.strip()
                    if stmt:
                        cur.execute(stmt)
                con.commit()
            finally:
                cur.close()
        else:
            con.executescript(SCHEMA_SQLITE)
    finally:
        con.close()

    logger.info(
        "Schema ensured (%s)", "PostgreSQL" if postgres_mode else "SQLite"
    )
