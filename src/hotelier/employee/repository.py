from typing import List, Optional

from hotelier import db
from hotelier.employee.model import Employee, EmployeeRole
from hotelier.errors import NotFoundError


class EmployeeRepository:
    """
    Repository for employee data access.
    Encapsulates all SQL and queries for the employees table.
    """

    def find_by_id(self, employee_id: int) -> Employee:
        """Get an employee by ID. Raises NotFoundError if it does not exist."""
        row = db.fetch_one(
            "SELECT * FROM employees WHERE id = %s",
            (employee_id,)
        )
        if not row:
            raise NotFoundError(f"Employee {employee_id} not found")
        return Employee.from_row(row)

    def list(self, role: Optional[EmployeeRole] = None) -> List[Employee]:
        """List employees, optionally filtered by role."""
        if role is not None:
            rows = db.fetch_all(
                "SELECT * FROM employees WHERE role = %s ORDER BY last_name, first_name",
                (EmployeeRole(role).value,)
            )
        else:
            rows = db.fetch_all("SELECT * FROM employees ORDER BY last_name, first_name")
        return [Employee.from_row(row) for row in rows]

    def create(
        self,
        first_name: str,
        last_name: str,
        role: EmployeeRole = EmployeeRole.HOUSEKEEPER,
    ) -> Employee:
        """Create a new employee."""
        row = db.fetch_one(
            """
            INSERT INTO employees (first_name, last_name, role)
            VALUES (%s, %s, %s)
            RETURNING *
            """,
            (first_name, last_name, EmployeeRole(role).value)
        )
        return Employee.from_row(row)
