"""
Room Repository

CRUD operations against the Room table. Every call opens its own
connection, runs one statement and closes the connection before returning.
"""

import logging
from typing import Any

from roommates.db.connection import ConnectionProvider
from roommates.models import Room
from roommates.repositories.rows import column_reader

logger = logging.getLogger(__name__)


class RoomRepository:
    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def _to_room(self, read, row: Any) -> Room:
        return Room(
            id=read(row, "Id"),
            name=read(row, "Name"),
            max_occupancy=read(row, "MaxOccupancy"),
        )

    def get_all(self) -> list[Room]:
        """Return every room, in the order the database returns them."""
        with self.provider.cursor() as (_, cur):
            cur.execute("SELECT Id, Name, MaxOccupancy FROM Room")
            read = column_reader(cur)
            rooms = [self._to_room(read, row) for row in cur.fetchall()]
        logger.debug("Loaded %s rooms", len(rooms))
        return rooms

    def get_by_id(self, room_id: int) -> Room | None:
        """Return the room with the given id, or None if there is none."""
        ph = self.provider.placeholder
        with self.provider.cursor() as (_, cur):
            cur.execute(
                f"SELECT Id, Name, MaxOccupancy FROM Room WHERE Id = {ph}",
                (room_id,),
            )
            row = cur.fetchone()
            if row is None:
                logger.debug("Room %s not found", room_id)
                return None
            return self._to_room(column_reader(cur), row)

    def insert(self, room: Room) -> Room:
        """Insert a room and write the generated id back onto it.

        The caller's record is mutated in place and also returned.
        """
        ph = self.provider.placeholder
        params = (room.name, room.max_occupancy)
        with self.provider.cursor() as (conn, cur):
            if self.provider.is_postgres:
                cur.execute(
                    f"INSERT INTO Room (Name, MaxOccupancy) VALUES ({ph}, {ph}) "
                    "RETURNING Id",
                    params,
                )
                new_id = cur.fetchone()[0]
            else:
                cur.execute(
                    f"INSERT INTO Room (Name, MaxOccupancy) VALUES ({ph}, {ph})",
                    params,
                )
                new_id = cur.lastrowid
            conn.commit()

        room.id = new_id
        logger.info("Inserted room %s (%s)", new_id, room.name)
        return room

    def update(self, room: Room) -> None:
        """Update name and max occupancy by id. Unknown ids are a no-op."""
        ph = self.provider.placeholder
        with self.provider.cursor() as (conn, cur):
            cur.execute(
                f"UPDATE Room SET Name = {ph}, MaxOccupancy = {ph} WHERE Id = {ph}",
                (room.name, room.max_occupancy, room.id),
            )
            affected = cur.rowcount
            conn.commit()
        logger.info("Updated room %s (%s rows)", room.id, affected)

    def delete(self, room_id: int) -> None:
        """Delete the room with the given id. Unknown ids are a no-op."""
        ph = self.provider.placeholder
        with self.provider.cursor() as (conn, cur):
            cur.execute(f"DELETE FROM Room WHERE Id = {ph}", (room_id,))
            affected = cur.rowcount
            conn.commit()
        logger.info("Deleted room %s (%s rows)", room_id, affected)
