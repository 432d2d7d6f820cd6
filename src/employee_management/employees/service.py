from __future__ import annotations

import dataclasses
import logging
from typing import Iterator, Optional, Union

from ..common.validators import (
    optional_text,
    require_choice,
    require_in_range,
    require_int,
    require_non_empty,
    require_non_negative,
)
from ..core.constants import DEFAULT_VACATION_DAYS, MAX_EMPLOYEE_AGE, MIN_EMPLOYEE_AGE, VACATION_PAYOUT_DAYS
from ..core.enums import Role, WageKind
from ..core.exceptions import NotFoundError, VacationDaysShortageError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

SHORTAGE_MESSAGE = "Not enough vacation days are available."


def _clean_age(value):
    if value is None:
        return None
    return require_in_range(value, "age", MIN_EMPLOYEE_AGE, MAX_EMPLOYEE_AGE)


def _clean_vacation_days(value):
    return require_non_negative(require_int(value, "vacation_days"), "vacation_days")


# Every mutable field and the rule that validates it.
FIELD_RULES = {
    "name": lambda v: require_non_empty(v, "name"),
    "role": lambda v: require_choice(v, Role, "role"),
    "salary": lambda v: require_non_negative(v, "salary"),
    "department": lambda v: optional_text(v, "department"),
    "age": _clean_age,
    "wage_kind": lambda v: require_choice(v, WageKind, "wage_kind"),
    "vacation_days": _clean_vacation_days,
}


def clean_fields(fields: dict) -> dict:
    """Validate and normalise `fields` against FIELD_RULES.

    Raises on the first invalid or unknown field; nothing is returned partially.
    """
    cleaned = {}
    for name, value in fields.items():
        if name == "employee_id":
            raise ValidationError("employee_id cannot be changed", field=name, rule="immutable")
        rule = FIELD_RULES.get(name)
        if rule is None:
            raise ValidationError(f"Unknown field: {name}", field=name, rule="unknown_field")
        cleaned[name] = rule(value)
    return cleaned


class EmployeeListing:
    """Lazy, restartable view over the registry.

    Nothing is read until iteration starts, and every new iteration re-reads
    the store in insertion order.
    """

    def __init__(self, employees: EmployeeRepository, *, department: Optional[str] = None, role: Optional[Role] = None):
        self._employees = employees
        self._department = department
        self._role = role

    def __iter__(self) -> Iterator[Employee]:
        for e in self._employees.iter_all():
            if self._department is not None and e.department != self._department:
                continue
            if self._role is not None and e.role != self._role:
                continue
            yield e


class EmployeeRegistry:
    """Use case: manage employee records (add/remove/update/get/list)."""

    def __init__(self, employees: EmployeeRepository, *, default_vacation_days: int = DEFAULT_VACATION_DAYS):
        self._employees = employees
        self._default_vacation_days = default_vacation_days

    def add(
        self,
        *,
        name: str,
        salary: Union[int, float],
        role: Union[Role, str] = Role.DEVELOPER,
        department: Optional[str] = None,
        age: Optional[int] = None,
        wage_kind: Union[WageKind, str] = WageKind.SALARIED,
        vacation_days: Optional[int] = None,
    ) -> int:
        if vacation_days is None:
            vacation_days = self._default_vacation_days

        try:
            fields = clean_fields(
                {
                    "name": name,
                    "role": role,
                    "salary": salary,
                    "department": department,
                    "age": age,
                    "wage_kind": wage_kind,
                    "vacation_days": vacation_days,
                }
            )
        except ValidationError as e:
            logger.debug("Rejected new employee: %s (rule=%s)", e.message, e.rule)
            raise

        employee_id = self._employees.create(**fields)
        logger.info("Added employee %s (%s)", employee_id, fields["name"])
        return employee_id

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(employee_id)
        return employee

    def remove(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError(employee_id)
        logger.info("Removed employee %s", employee_id)

    def update(self, employee_id: int, /, **changes) -> Employee:
        current = self.get(employee_id)
        cleaned = clean_fields(changes)

        updated = dataclasses.replace(current, **cleaned)
        if not self._employees.replace(updated):
            raise NotFoundError(employee_id)
        if cleaned:
            logger.info("Updated employee %s: %s", employee_id, ", ".join(sorted(cleaned)))
        return updated

    def list(self, *, department: Optional[str] = None, role: Union[Role, str, None] = None) -> EmployeeListing:
        if role is not None:
            role = require_choice(role, Role, "role")
        return EmployeeListing(self._employees, department=optional_text(department, "department"), role=role)

    def count(self) -> int:
        return self._employees.count()


class VacationService:
    """Use case: spend or pay out an employee's vacation days."""

    def __init__(self, registry: EmployeeRegistry, *, payout_days: int = VACATION_PAYOUT_DAYS):
        self._registry = registry
        self._payout_days = payout_days

    def _subtract(self, employee_id: int, days: int) -> int:
        employee = self._registry.get(employee_id)
        if employee.vacation_days < days:
            raise VacationDaysShortageError(
                requested_days=days,
                remaining_days=employee.vacation_days,
                message=SHORTAGE_MESSAGE,
            )
        updated = self._registry.update(employee_id, vacation_days=employee.vacation_days - days)
        return updated.vacation_days

    def take_vacation(self, employee_id: int, days: int) -> int:
        days = require_int(days, "days")
        if days <= 0:
            raise ValidationError("days must be positive", field="days", rule="positive")

        remaining = self._subtract(employee_id, days)
        logger.info("Employee %s took %s vacation days, %s left", employee_id, days, remaining)
        return remaining

    def payout_vacation(self, employee_id: int) -> int:
        remaining = self._subtract(employee_id, self._payout_days)
        logger.info("Paid out %s vacation days for employee %s, %s left", self._payout_days, employee_id, remaining)
        return remaining
