from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_optional_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    local, _, domain = value.partition("@")
    if not local or "." not in domain:
        raise ValidationError(f"{field_name} is not a valid address")
    return value.lower()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_number(value: Any, field_name: str, *, positive: bool = False) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    if positive and number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def optional_number(value: Any, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    return require_number(value, field_name)


def require_date(value: Any, field_name: str) -> date:
    parsed = optional_date(value, field_name)
    if parsed is None:
        raise ValidationError(f"{field_name} is required")
    return parsed


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if isinstance(value, date):
        return value
    try:
        return parse_optional_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date (YYYY-MM-DD)")


def require_id(value: Any, field_name: str) -> int:
    try:
        ident = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not valid")
    if ident <= 0:
        raise ValidationError(f"{field_name} is not valid")
    return ident
