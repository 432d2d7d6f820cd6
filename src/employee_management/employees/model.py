from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.constants import DEFAULT_VACATION_DAYS
from ..core.enums import Role, WageKind


@dataclass(frozen=True)
class Employee:
    """Domain entity: one employee record.

    Plain data object; `employee_id` is assigned by the repository and never
    changes. `salary` is a monthly amount for salaried staff and an hourly
    rate for hourly staff.
    """

    employee_id: int
    name: str
    role: Role
    salary: Union[int, float]
    department: Optional[str] = None
    age: Optional[int] = None
    wage_kind: WageKind = WageKind.SALARIED
    vacation_days: int = DEFAULT_VACATION_DAYS

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "role": self.role.value,
            "salary": self.salary,
            "department": self.department,
            "age": self.age,
            "wage_kind": self.wage_kind.value,
            "vacation_days": self.vacation_days,
        }
