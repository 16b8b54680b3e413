import logging
from contextlib import AbstractContextManager
from typing import Callable

from psycopg.errors import UniqueViolation

from hotelier import db
from hotelier.cleaning.model import CleaningTask
from hotelier.cleaning.policy import CleaningPolicy
from hotelier.cleaning.repository import CleaningRepository
from hotelier.clock import Clock, now_millis
from hotelier.employee import EmployeeRepository
from hotelier.errors import ConflictError, ForbiddenError, NotFoundError
from hotelier.paging import Page, PageRequest
from hotelier.room import Room, RoomRepository

logger = logging.getLogger(__name__)


class CleaningService:
    """
    Coordinates cleaning work between reception, housekeeping and room state.

    Every public operation that writes runs inside a single transaction so the
    cleaning record and the room's cleaning status change together. The rule
    it maintains: a room has a cleaning task exactly while it is scheduled
    for cleaning or being cleaned.
    """

    def __init__(
        self,
        store: CleaningRepository = None,
        rooms: RoomRepository = None,
        employees: EmployeeRepository = None,
        policy: CleaningPolicy = None,
        clock: Clock = None,
        transaction: Callable[[], AbstractContextManager] = None,
    ):
        self.store = store or CleaningRepository()
        self.rooms = rooms or RoomRepository()
        self.employees = employees or EmployeeRepository()
        self.policy = policy or CleaningPolicy()
        self.clock = clock or now_millis
        self.transaction = transaction or db.transaction

    # -- Create/Delete

    def create_cleaning(self, task: CleaningTask) -> CleaningTask:
        """Persist a task as-is and return the stored copy."""
        return self.store.save(task)

    def remove_cleaning(self, task: CleaningTask) -> None:
        """Delete a task. Removing a task that is already gone is a no-op."""
        self.store.delete(task)

    def cancel_cleaning(self, room_number: int) -> Room:
        """
        Drop the cleaning task for a room and return the room to AVAILABLE.

        Raises NotFoundError if the room does not exist or has no task.
        """
        with self.transaction():
            room = self.rooms.find_by_room_number(room_number)
            task = self.find_by_room(room.room_number)
            self.store.delete(task)
            room = self.rooms.mark_available(room.room_number)

        logger.info("Cancelled cleaning %s for room %s", task.id, room_number)
        return room

    def schedule_cleaning(self, employee_id: int, room_number: int, priority: int) -> CleaningTask:
        """
        Queue a room for cleaning and assign it to an employee.

        Any role may be assigned. Raises NotFoundError for an unknown room or
        employee and ConflictError if the room already has a task.
        """
        if priority < 0:
            raise ValueError(f"Priority must be >= 0, got {priority}")

        with self.transaction():
            room = self.rooms.find_by_room_number(room_number)
            employee = self.employees.find_by_id(employee_id)

            if self.store.find_by_room(room.room_number) is not None:
                logger.warning("Room %s already has a cleaning task", room.room_number)
                raise ConflictError(f"Room {room.room_number} is already scheduled for cleaning")

            try:
                task = self.store.save(
                    CleaningTask(
                        id=None,
                        room_number=room.room_number,
                        employee_id=employee.id,
                        date_added=self.clock(),
                        priority=priority,
                    )
                )
            except UniqueViolation as e:
                logger.warning("Concurrent scheduling of room %s", room.room_number)
                raise ConflictError(
                    f"Room {room.room_number} is already scheduled for cleaning"
                ) from e

            self.rooms.mark_scheduled(room.room_number)

        logger.info(
            "Scheduled cleaning %s for room %s (employee=%s, priority=%s)",
            task.id, task.room_number, task.employee_id, task.priority,
        )
        return task

    # -- Cleaning Start/Stop

    def start_cleaning(self, worker_id: int, room_number: int) -> Room:
        """
        Mark a room as being cleaned.

        The cleaning task is left untouched; the task plus the BEING_CLEANED
        status together mean the work is in progress. Raises NotFoundError if
        the room does not exist or has no cleaning task.
        """
        with self.transaction():
            worker = self.employees.find_by_id(worker_id)
            self._authorize(worker, room_number)
            room = self.rooms.find_by_room_number(room_number)
            self.find_by_room(room.room_number)
            room = self.rooms.mark_being_cleaned(room.room_number)

        logger.info("Employee %s started cleaning room %s", worker_id, room_number)
        return room

    def finish_cleaning(self, worker_id: int, room_number: int) -> Room:
        """
        Close out the cleaning task for a room and mark the room clean.

        The room is looked up before the role check, so a missing room is
        reported as NotFoundError to every caller. Raises NotFoundError if
        the room has no cleaning task.
        """
        with self.transaction():
            worker = self.employees.find_by_id(worker_id)
            room = self.rooms.find_by_room_number(room_number)
            self._authorize(worker, room.room_number)

            task = self.find_by_room(room.room_number)
            self.store.delete(task)
            room = self.rooms.mark_clean(room.room_number)

        logger.info("Employee %s finished cleaning room %s", worker_id, room_number)
        return room

    # -- Finds

    def list_all(self, page: PageRequest) -> Page[CleaningTask]:
        """All tasks, highest priority first, then oldest first."""
        return self.store.list_all(page)

    def list_by_employee(self, employee_id: int, page: PageRequest) -> Page[CleaningTask]:
        """Tasks assigned to one employee, in work queue order."""
        employee = self.employees.find_by_id(employee_id)
        return self.store.list_by_employee(employee.id, page)

    def find_by_room(self, room_number: int) -> CleaningTask:
        task = self.store.find_by_room(room_number)
        if task is None:
            raise NotFoundError(f"No cleaning scheduled for room {room_number}")
        return task

    def _authorize(self, worker, room_number: int) -> None:
        try:
            self.policy.authorize_housekeeping(worker)
        except ForbiddenError:
            logger.warning(
                "Refused housekeeping on room %s for employee %s (%s)",
                room_number, worker.id, worker.role.value,
            )
            raise
