from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CleaningTask:
    """
    Outstanding housekeeping work on one room.

    date_added is epoch milliseconds and never changes once the task exists.
    """

    id: Optional[int]
    room_number: int
    employee_id: int
    date_added: int
    priority: int

    @classmethod
    def from_row(cls, row: dict) -> "CleaningTask":
        return cls(
            id=row["id"],
            room_number=row["room_number"],
            employee_id=row["employee_id"],
            date_added=row["date_added"],
            priority=row["priority"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "room_number": self.room_number,
            "employee_id": self.employee_id,
            "date_added": self.date_added,
            "priority": self.priority,
        }
