"""
Roommate Repository

Read operations against the Roommate table, including the Room join.
"""

import logging
from typing import Any

from roommates.db.connection import ConnectionProvider
from roommates.models import Room, Roommate
from roommates.repositories.rows import column_reader

logger = logging.getLogger(__name__)

_COLUMNS = "Id, FirstName, LastName, RentPortion, MoveInDate, RoomId"


class RoommateRepository:
    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def _to_roommate(self, read, row: Any) -> Roommate:
        return Roommate(
            id=read(row, "Id"),
            first_name=read(row, "FirstName"),
            last_name=read(row, "LastName"),
            rent_portion=read(row, "RentPortion"),
            move_in_date=read(row, "MoveInDate"),
            room_id=read(row, "RoomId"),
        )

    def get_all(self) -> list[Roommate]:
        """Return every roommate without its room."""
        with self.provider.cursor() as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Roommate")
            read = column_reader(cur)
            roommates = [self._to_roommate(read, row) for row in cur.fetchall()]
        logger.debug("Loaded %s roommates", len(roommates))
        return roommates

    def get_by_id(self, roommate_id: int) -> Roommate | None:
        """Return the roommate with the given id, or None if there is none."""
        ph = self.provider.placeholder
        with self.provider.cursor() as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM Roommate WHERE Id = {ph}", (roommate_id,)
            )
            row = cur.fetchone()
            if row is None:
                logger.debug("Roommate %s not found", roommate_id)
                return None
            return self._to_roommate(column_reader(cur), row)

    def get_all_with_room(self, room_id: int) -> list[Roommate]:
        """Return the roommates living in a room, each with the room's name.

        Only first/last name and the embedded room (id and name) are filled in.
        """
        ph = self.provider.placeholder
        with self.provider.cursor() as (_, cur):
            cur.execute(
                "SELECT rm.FirstName, rm.LastName, r.Name "
                "FROM Roommate rm "
                "JOIN Room r ON rm.RoomId = r.Id "
                f"WHERE rm.RoomId = {ph}",
                (room_id,),
            )
            read = column_reader(cur)
            roommates = [
                Roommate(
                    first_name=read(row, "FirstName"),
                    last_name=read(row, "LastName"),
                    room=Room(id=room_id, name=read(row, "Name")),
                )
                for row in cur.fetchall()
            ]
        logger.debug("Loaded %s roommates for room %s", len(roommates), room_id)
        return roommates
