from dataclasses import dataclass
from enum import Enum


class CleaningStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    SCHEDULED_FOR_CLEANING = "SCHEDULED_FOR_CLEANING"
    BEING_CLEANED = "BEING_CLEANED"
    CLEAN = "CLEAN"


@dataclass
class Room:
    room_number: int
    cleaning_status: CleaningStatus = CleaningStatus.AVAILABLE

    @classmethod
    def from_row(cls, row: dict) -> "Room":
        return cls(
            room_number=row["room_number"],
            cleaning_status=CleaningStatus(row["cleaning_status"]),
        )

    def to_dict(self) -> dict:
        return {
            "room_number": self.room_number,
            "cleaning_status": self.cleaning_status.value,
        }
