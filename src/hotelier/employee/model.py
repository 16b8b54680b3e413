from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EmployeeRole(str, Enum):
    RECEPTIONIST = "RECEPTIONIST"
    HOUSEKEEPER = "HOUSEKEEPER"
    MAINTENANCE = "MAINTENANCE"
    ADMIN = "ADMIN"


@dataclass
class Employee:
    id: Optional[int]
    first_name: str
    last_name: str
    role: EmployeeRole

    @classmethod
    def from_row(cls, row: dict) -> "Employee":
        return cls(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            role=EmployeeRole(row["role"]),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
        }
