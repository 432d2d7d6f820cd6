from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from ..employees.service import EmployeeRegistry
from .factory import PayCalculatorFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Payment:
    employee_id: int
    name: str
    amount: float


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    total: float


class PayrollService:
    def __init__(self, registry: EmployeeRegistry, *, factory: Optional[PayCalculatorFactory] = None):
        self._registry = registry
        self._factory = factory or PayCalculatorFactory()

    def pay(self, employee_id: int, *, hours_worked: Optional[float] = None) -> Payment:
        employee = self._registry.get(employee_id)
        amount = self._factory.for_employee(employee).calculate(employee, hours_worked)
        logger.info("Paying %s for %s", amount, employee.name)
        return Payment(employee_id=employee.employee_id, name=employee.name, amount=amount)

    def build_payroll_report(
        self,
        *,
        department: Optional[str] = None,
        hours_by_employee: Optional[Mapping[int, float]] = None,
    ) -> ReportData:
        """Compute pay for every employee (optionally one department).

        Hourly employees missing from `hours_by_employee` are paid for 0 hours.
        Rows are ordered by amount, highest first, not by insertion order.
        """
        hours_by_employee = hours_by_employee or {}
        out_rows: list[dict] = []
        total = 0.0

        for e in self._registry.list(department=department):
            hours = hours_by_employee.get(e.employee_id, 0)
            amount = self._factory.for_employee(e).calculate(e, hours)
            total += amount
            out_rows.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "role": e.role.value,
                    "department": e.department or "-",
                    "wage_kind": e.wage_kind.value,
                    "amount": round(amount, 2),
                }
            )

        out_rows.sort(key=lambda x: x["amount"], reverse=True)
        return ReportData(rows=out_rows, total=round(total, 2))
