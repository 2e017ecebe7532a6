"""
Run the repository operations against a database and print the results.

Usage:
    # SQLite (local dev)
    python -m roommates --init-schema

    # PostgreSQL
    DATABASE_URL=postgresql://... python -m roommates --room-id 2
"""

import argparse
import logging
import sys

from roommates.core.config import settings
from roommates.db import ConnectionProvider, ensure_schema
from roommates.models import Room
from roommates.repositories import RoomRepository, RoommateRepository

logger = logging.getLogger(__name__)


def _print_rooms(rooms: list[Room]) -> None:
    for room in rooms:
        print(f"{room.id} {room.name} {room.max_occupancy}")


def run_room_demo(repo: RoomRepository) -> None:
    """Insert, rename and delete a room, printing the table after each step."""
    bathroom = Room(name="Bathroom", max_occupancy=3)
    repo.insert(bathroom)
    print("-------------------------------")
    print(f"Added the new Room with id {bathroom.id}")
    _print_rooms(repo.get_all())

    print("-------------------------------")
    print(f"Updating Room with id {bathroom.id}")
    repo.update(Room(id=bathroom.id, name="Washroom", max_occupancy=15))
    _print_rooms(repo.get_all())

    print("-------------------------------")
    print(f"Deleting Room with id {bathroom.id}")
    repo.delete(bathroom.id)
    _print_rooms(repo.get_all())


def run(provider: ConnectionProvider, room_id: int, demo_room_crud: bool) -> None:
    roommate_repo = RoommateRepository(provider)
    room_repo = RoomRepository(provider)

    print("Getting All Roommates:")
    print()
    for roommate in roommate_repo.get_all():
        print(
            f"{roommate.id} {roommate.first_name} {roommate.last_name} "
            f"{roommate.rent_portion} {roommate.move_in_date} {roommate.room}"
        )

    print("----------------------------")
    print("Getting Roommate with Id 1")
    single = roommate_repo.get_by_id(1)
    if single is None:
        print("Roommate 1 not found")
    else:
        print(f"{single.id} {single.first_name} {single.last_name}")

    print("----------------------------")
    print(f"Getting Roommates in Room {room_id}")
    for roommate in roommate_repo.get_all_with_room(room_id):
        print(f"{roommate.first_name} {roommate.last_name} {roommate.room.name}")

    print("----------------------------")
    print("Getting All Rooms:")
    print()
    _print_rooms(room_repo.get_all())

    if demo_room_crud:
        run_room_demo(room_repo)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query rooms and roommates")
    parser.add_argument(
        "--database",
        default=None,
        help="Connection string (PostgreSQL DSN or SQLite path); "
        "defaults to DATABASE_URL / ROOMMATES_DB",
    )
    parser.add_argument(
        "--room-id", type=int, default=1, help="Room to list roommates for"
    )
    parser.add_argument(
        "--demo-room-crud",
        action="store_true",
        help="Insert, update and delete a sample room",
    )
    parser.add_argument(
        "--init-schema",
        action="store_true",
        help="Create the Room and Roommate tables if missing",
    )
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=settings.log_level)
        provider = ConnectionProvider(args.database or settings.connection_string)
        if args.init_schema:
            ensure_schema(provider)
        run(provider, args.room_id, args.demo_room_crud)
    except Exception:
        logger.exception("Roommates run failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
