from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...employees.model import Employee


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, employee: Employee, hours_worked: Optional[float] = None) -> float:
        raise NotImplementedError
