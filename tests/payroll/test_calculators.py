from __future__ import annotations

import pytest

from employee_management.core.enums import Role, WageKind
from employee_management.core.exceptions import ValidationError
from employee_management.employees.model import Employee
from employee_management.payroll.calculator.hourly_calculator import HourlyPayCalculator
from employee_management.payroll.calculator.salaried_calculator import SalariedPayCalculator
from employee_management.payroll.factory import PayCalculatorFactory


def _employee(wage_kind: WageKind, salary) -> Employee:
    return Employee(employee_id=1, name="Jane", role=Role.DEVELOPER, salary=salary, wage_kind=wage_kind)


def test_salaried_pays_monthly_salary():
    assert SalariedPayCalculator().calculate(_employee(WageKind.SALARIED, 1000.0)) == 1000.0


def test_hourly_pays_rate_times_hours():
    assert HourlyPayCalculator().calculate(_employee(WageKind.HOURLY, 10.0), 40.0) == 400.0


def test_hourly_requires_hours():
    with pytest.raises(ValidationError):
        HourlyPayCalculator().calculate(_employee(WageKind.HOURLY, 10.0))


def test_hourly_rejects_negative_hours():
    with pytest.raises(ValidationError):
        HourlyPayCalculator().calculate(_employee(WageKind.HOURLY, 10.0), -1)


def test_factory_picks_by_wage_kind():
    factory = PayCalculatorFactory()

    assert isinstance(factory.for_employee(_employee(WageKind.SALARIED, 1)), SalariedPayCalculator)
    assert isinstance(factory.for_employee(_employee(WageKind.HOURLY, 1)), HourlyPayCalculator)


@pytest.mark.parametrize("hours", [float("nan"), float("inf")])
def test_hourly_rejects_non_finite_hours(hours):
    with pytest.raises(ValidationError):
        HourlyPayCalculator().calculate(_employee(WageKind.HOURLY, 10.0), hours)
