from typing import FrozenSet

from hotelier.employee.model import Employee, EmployeeRole
from hotelier.errors import ForbiddenError


class CleaningPolicy:
    """Decides which employees may start and finish cleanings."""

    def __init__(self, denied_roles: FrozenSet[EmployeeRole] = frozenset({EmployeeRole.RECEPTIONIST})):
        self.denied_roles = frozenset(denied_roles)

    def can_clean(self, employee: Employee) -> bool:
        return employee.role not in self.denied_roles

    def authorize_housekeeping(self, employee: Employee) -> None:
        """Raise ForbiddenError if the employee may not perform housekeeping."""
        if not self.can_clean(employee):
            raise ForbiddenError(
                f"Employee {employee.id} with role {employee.role.value} cannot perform housekeeping"
            )
