from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    `field` names the offending attribute and `rule` the validation rule that
    rejected it, so callers can react without parsing the message.
    """

    def __init__(self, message: str, *, field: Optional[str] = None, rule: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.rule = rule


class NotFoundError(DomainError):
    """Raised when a referenced employee identifier does not exist."""

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} does not exist")
        self.employee_id = employee_id


class VacationDaysShortageError(DomainError):
    """Raised when more vacation days are requested than remain."""

    def __init__(self, *, requested_days: int, remaining_days: int, message: str):
        super().__init__(message)
        self.requested_days = requested_days
        self.remaining_days = remaining_days
        self.message = message

    def __str__(self) -> str:
        return (
            "Not enough vacation days are available. "
            f"Requested: {self.requested_days}, Remaining: {self.remaining_days}. Message: {self.message}"
        )
