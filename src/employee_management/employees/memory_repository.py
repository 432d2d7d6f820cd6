from __future__ import annotations

from typing import Iterator, Optional

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed store; identifiers start at 1 and are never reused."""

    def __init__(self):
        self._by_id: dict[int, Employee] = {}
        self._last_id = 0

    def create(self, **fields) -> int:
        self._last_id += 1
        employee_id = self._last_id
        self._by_id[employee_id] = Employee(employee_id=employee_id, **fields)
        return employee_id

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def replace(self, employee: Employee) -> bool:
        if employee.employee_id not in self._by_id:
            return False
        # dict assignment to an existing key keeps insertion order
        self._by_id[employee.employee_id] = employee
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._by_id.pop(employee_id, None) is not None

    def iter_all(self) -> Iterator[Employee]:
        yield from tuple(self._by_id.values())

    def count(self) -> int:
        return len(self._by_id)
