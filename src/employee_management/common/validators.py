"""Named validation rules.

Each rule returns the normalised value or raises `ValidationError` tagged with
the field name and the rule that failed.
"""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from typing import Optional, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty", field=field_name, rule="non_empty")
    return value.strip()


def require_number(value, field_name: str) -> float:
    # bool is an int subclass; True is not a salary.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{field_name} must be a number", field=field_name, rule="numeric")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number", field=field_name, rule="numeric")
    return value


def require_non_negative(value, field_name: str):
    value = require_number(value, field_name)
    if not value >= 0:
        raise ValidationError(f"{field_name} must not be negative", field=field_name, rule="non_negative")
    return value


def require_int(value, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer", field=field_name, rule="integer")
    return value


def require_in_range(value, field_name: str, min_value: int, max_value: int) -> int:
    value = require_int(value, field_name)
    if not min_value <= value <= max_value:
        raise ValidationError(
            f"{field_name} must be between {min_value} and {max_value}",
            field=field_name,
            rule="in_range",
        )
    return value


def require_choice(value, enum_cls: type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}", field=field_name, rule="choice")


def optional_text(value: Optional[str], field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text", field=field_name, rule="non_empty")
    return value.strip() or None
