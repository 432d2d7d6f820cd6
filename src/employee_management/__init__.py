"""Employee Management package.

Organized by feature modules (employees, payroll, company) with a thin Flask
controller layer over service/repository layers.
"""

from .core.enums import Role, WageKind
from .core.exceptions import DomainError, NotFoundError, VacationDaysShortageError, ValidationError
from .employees.model import Employee
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeRegistry, VacationService

__all__ = [
    "DomainError",
    "Employee",
    "EmployeeRegistry",
    "InMemoryEmployeeRepository",
    "NotFoundError",
    "Role",
    "VacationDaysShortageError",
    "VacationService",
    "ValidationError",
    "WageKind",
]
