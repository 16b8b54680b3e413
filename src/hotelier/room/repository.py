from typing import List

from hotelier import db
from hotelier.errors import NotFoundError
from hotelier.room.model import CleaningStatus, Room


class RoomRepository:
    """
    Repository for room data access.
    Encapsulates all SQL and queries for the rooms table, and is the only
    place that writes a room's cleaning status.
    """

    def find_by_room_number(self, room_number: int) -> Room:
        """Get a room by number. Raises NotFoundError if it does not exist."""
        row = db.fetch_one(
            "SELECT * FROM rooms WHERE room_number = %s",
            (room_number,)
        )
        if not row:
            raise NotFoundError(f"Room {room_number} not found")
        return Room.from_row(row)

    def list(self) -> List[Room]:
        """List all rooms ordered by number."""
        rows = db.fetch_all("SELECT * FROM rooms ORDER BY room_number")
        return [Room.from_row(row) for row in rows]

    def create(
        self,
        room_number: int,
        cleaning_status: CleaningStatus = CleaningStatus.AVAILABLE,
    ) -> Room:
        """Create a new room."""
        row = db.fetch_one(
            """
            INSERT INTO rooms (room_number, cleaning_status)
            VALUES (%s, %s)
            RETURNING *
            """,
            (room_number, CleaningStatus(cleaning_status).value)
        )
        return Room.from_row(row)

    # Cleaning status transitions

    def mark_scheduled(self, room_number: int) -> Room:
        """Available -> ScheduledForCleaning."""
        return self._set_status(room_number, CleaningStatus.SCHEDULED_FOR_CLEANING)

    def mark_being_cleaned(self, room_number: int) -> Room:
        """ScheduledForCleaning -> BeingCleaned."""
        return self._set_status(room_number, CleaningStatus.BEING_CLEANED)

    def mark_clean(self, room_number: int) -> Room:
        """BeingCleaned -> Clean."""
        return self._set_status(room_number, CleaningStatus.CLEAN)

    def mark_available(self, room_number: int) -> Room:
        """Clean -> Available, e.g. once a guest checks out."""
        return self._set_status(room_number, CleaningStatus.AVAILABLE)

    def _set_status(self, room_number: int, status: CleaningStatus) -> Room:
        row = db.fetch_one(
            """
            UPDATE rooms
            SET cleaning_status = %s, updated_at = now()
            WHERE room_number = %s
            RETURNING *
            """,
            (status.value, room_number)
        )
        if not row:
            raise NotFoundError(f"Room {room_number} not found")
        return Room.from_row(row)
