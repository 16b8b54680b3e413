"""
Employee

This package provides the staff directory used for assignment and
authorization checks.
"""

from hotelier.employee.model import Employee, EmployeeRole
from hotelier.employee.repository import EmployeeRepository

__all__ = ["Employee", "EmployeeRole", "EmployeeRepository"]
