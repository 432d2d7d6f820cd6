from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_non_empty
from ..employees.model import Employee
from ..employees.service import EmployeeRegistry


@dataclass
class Company:
    """A named company owning one employee registry."""

    name: str
    registry: EmployeeRegistry

    def __post_init__(self):
        self.name = require_non_empty(self.name, "company name")

    def add_employee(self, **fields) -> int:
        return self.registry.add(**fields)

    def all_employees(self) -> list[Employee]:
        return list(self.registry.list())

    @property
    def headcount(self) -> int:
        return self.registry.count()
