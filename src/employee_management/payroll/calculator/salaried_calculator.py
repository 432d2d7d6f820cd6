from __future__ import annotations

from typing import Optional

from .base import PayCalculator
from ...employees.model import Employee


class SalariedPayCalculator(PayCalculator):
    """Pays the monthly salary; hours are ignored."""

    def calculate(self, employee: Employee, hours_worked: Optional[float] = None) -> float:
        return float(employee.salary)
