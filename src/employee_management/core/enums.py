from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Job title of an employee."""

    MANAGER = "manager"
    DEVELOPER = "developer"
    DESIGNER = "designer"
    ACCOUNTANT = "accountant"
    INTERN = "intern"


class WageKind(str, Enum):
    """How an employee's pay is computed from `salary`."""

    SALARIED = "salaried"
    HOURLY = "hourly"
