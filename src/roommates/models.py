"""
Room / Roommate Records

In-memory records mapped from Room and Roommate rows.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Room(BaseModel):
    """A physical space with a name and maximum occupant count"""

    id: int | None = Field(
        default=None, description="Assigned by storage on insert"
    )
    name: str = Field(..., description="Room name", examples=["Bathroom"])
    max_occupancy: int | None = Field(
        default=None, description="Maximum number of occupants"
    )


class Roommate(BaseModel):
    """A person living in at most one Room.

    ``room`` is only populated by the join query; other reads leave it unset.
    Join results carry only the names and the embedded room.
    """

    id: int | None = None
    first_name: str
    last_name: str
    rent_portion: int | None = Field(default=None, description="Percent of rent")
    move_in_date: datetime | None = None
    room_id: int | None = None
    room: Room | None = None
