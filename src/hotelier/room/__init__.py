"""
Room

This package provides the room records and the gateway that owns each
room's cleaning status.
"""

from hotelier.room.model import CleaningStatus, Room
from hotelier.room.repository import RoomRepository

__all__ = ["CleaningStatus", "Room", "RoomRepository"]
