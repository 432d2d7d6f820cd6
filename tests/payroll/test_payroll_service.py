from __future__ import annotations

import logging

import pytest

from employee_management.core.enums import WageKind
from employee_management.core.exceptions import NotFoundError
from employee_management.payroll.service import PayrollService


def test_pay_salaried_and_logs(registry, caplog):
    employee_id = registry.add(name="John", salary=1000)
    svc = PayrollService(registry)

    with caplog.at_level(logging.INFO, logger="employee_management.payroll.service"):
        payment = svc.pay(employee_id)

    assert payment.amount == 1000.0
    assert payment.name == "John"
    assert "Paying 1000.0 for John" in caplog.text


def test_pay_hourly(registry):
    employee_id = registry.add(name="Jane", salary=20.0, wage_kind=WageKind.HOURLY)

    assert PayrollService(registry).pay(employee_id, hours_worked=40).amount == 800.0


def test_pay_missing_employee(registry):
    with pytest.raises(NotFoundError):
        PayrollService(registry).pay(3)


def test_report_filters_department_and_defaults_hours(registry):
    a = registry.add(name="A", salary=3000, department="Ops")
    b = registry.add(name="B", salary=10.0, department="Ops", wage_kind="hourly")
    c = registry.add(name="C", salary=15.0, department="Ops", wage_kind="hourly")
    registry.add(name="D", salary=9999, department="Dev")

    report = PayrollService(registry).build_payroll_report(department="Ops", hours_by_employee={b: 100})

    assert [r["employee_id"] for r in report.rows] == [a, b, c]
    assert [r["amount"] for r in report.rows] == [3000.0, 1000.0, 0.0]
    assert report.total == 4000.0


def test_report_rows_ordered_by_amount(registry):
    low = registry.add(name="Low", salary=100)
    high = registry.add(name="High", salary=5000)

    report = PayrollService(registry).build_payroll_report()

    assert [r["employee_id"] for r in report.rows] == [high, low]
