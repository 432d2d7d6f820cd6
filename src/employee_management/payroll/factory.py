from __future__ import annotations

from typing import Optional

from ..core.enums import WageKind
from ..employees.model import Employee
from .calculator.base import PayCalculator
from .calculator.hourly_calculator import HourlyPayCalculator
from .calculator.salaried_calculator import SalariedPayCalculator


class PayCalculatorFactory:
    """Factory Pattern: pick the pay calculator for an employee's wage kind."""

    def __init__(self, calculators: Optional[dict[WageKind, PayCalculator]] = None):
        self._calculators = calculators or {
            WageKind.SALARIED: SalariedPayCalculator(),
            WageKind.HOURLY: HourlyPayCalculator(),
        }

    def for_employee(self, employee: Employee) -> PayCalculator:
        return self._calculators[employee.wage_kind]
