from __future__ import annotations

from typing import Optional

from .base import PayCalculator
from ...common.validators import require_non_negative
from ...core.exceptions import ValidationError
from ...employees.model import Employee


class HourlyPayCalculator(PayCalculator):
    """Hourly rule: rate * hours worked."""

    def calculate(self, employee: Employee, hours_worked: Optional[float] = None) -> float:
        if hours_worked is None:
            raise ValidationError("hours_worked is required for hourly employees", field="hours_worked", rule="required")
        hours = require_non_negative(hours_worked, "hours_worked")
        return float(employee.salary) * float(hours)
