from roommates.repositories.room import RoomRepository
from roommates.repositories.roommate import RoommateRepository

__all__ = ["RoomRepository", "RoommateRepository"]
