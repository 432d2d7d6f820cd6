from __future__ import annotations

from typing import Iterator, Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    The service layer depends on this interface, not on a concrete store.
    """

    def create(self, **fields) -> int:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def replace(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def iter_all(self) -> Iterator[Employee]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
