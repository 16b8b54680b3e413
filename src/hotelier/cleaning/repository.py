from typing import Optional

from hotelier import db
from hotelier.cleaning.model import CleaningTask
from hotelier.errors import NotFoundError
from hotelier.paging import Page, PageRequest

# Work queue order. Highest priority first, oldest request first within a
# priority, id as the final tie-break so paging is stable.
QUEUE_ORDER = "ORDER BY priority DESC, date_added ASC, id ASC"


class CleaningRepository:
    """
    Repository for cleaning task data access.
    Encapsulates all SQL and queries for the cleanings table.
    """

    def save(self, task: CleaningTask) -> CleaningTask:
        """
        Insert a new task (id is None) or overwrite an existing one by id.
        date_added is only written on insert. Raises NotFoundError when an
        id is given but no such task exists.
        """
        if task.id is None:
            row = db.fetch_one(
                """
                INSERT INTO cleanings (room_number, employee_id, date_added, priority)
                VALUES (%s, %s, %s, %s)
                RETURNING *
                """,
                (task.room_number, task.employee_id, task.date_added, task.priority),
            )
        else:
            row = db.fetch_one(
                """
                UPDATE cleanings
                SET room_number = %s, employee_id = %s, priority = %s
                WHERE id = %s
                RETURNING *
                """,
                (task.room_number, task.employee_id, task.priority, task.id),
            )
            if row is None:
                raise NotFoundError(f"Cleaning {task.id} not found")
        return CleaningTask.from_row(row)

    def delete(self, task: CleaningTask) -> None:
        """Delete a task by id. Deleting a task that is already gone is a no-op."""
        if task.id is None:
            return
        db.execute("DELETE FROM cleanings WHERE id = %s", (task.id,))

    def find_by_room(self, room_number: int) -> Optional[CleaningTask]:
        """Get the task for a room, if any."""
        row = db.fetch_one(
            "SELECT * FROM cleanings WHERE room_number = %s",
            (room_number,),
        )
        return CleaningTask.from_row(row) if row else None

    def list_all(self, page: PageRequest) -> Page[CleaningTask]:
        """Page through every task in work queue order."""
        rows = db.fetch_all(
            f"SELECT * FROM cleanings {QUEUE_ORDER} LIMIT %s OFFSET %s",
            (page.page_size, page.offset),
        )
        total = db.fetch_count("SELECT COUNT(*) AS count FROM cleanings")
        return Page(
            items=[CleaningTask.from_row(row) for row in rows],
            page_index=page.page_index,
            page_size=page.page_size,
            total=total,
        )

    def list_by_employee(self, employee_id: int, page: PageRequest) -> Page[CleaningTask]:
        """Page through the tasks assigned to one employee in work queue order."""
        rows = db.fetch_all(
            f"SELECT * FROM cleanings WHERE employee_id = %s {QUEUE_ORDER} LIMIT %s OFFSET %s",
            (employee_id, page.page_size, page.offset),
        )
        total = db.fetch_count(
            "SELECT COUNT(*) AS count FROM cleanings WHERE employee_id = %s",
            (employee_id,),
        )
        return Page(
            items=[CleaningTask.from_row(row) for row in rows],
            page_index=page.page_index,
            page_size=page.page_size,
            total=total,
        )
