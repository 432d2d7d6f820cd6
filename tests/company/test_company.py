from __future__ import annotations

import pytest

from employee_management.company.model import Company
from employee_management.core.enums import Role
from employee_management.core.exceptions import ValidationError


def test_company_holds_employees(registry):
    company = Company(name="My Company", registry=registry)
    company.add_employee(name="Jane", salary=500.0, role=Role.DEVELOPER, age=25)

    assert company.name == "My Company"
    assert company.headcount == 1
    employees = company.all_employees()
    assert [e.name for e in employees] == ["Jane"]
    assert employees[0].role == Role.DEVELOPER
    assert employees[0].age == 25


def test_company_requires_name(registry):
    with pytest.raises(ValidationError):
        Company(name="", registry=registry)
