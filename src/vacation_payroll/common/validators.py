from __future__ import annotations

from datetime import date
from decimal import Decimal

from ..core.exceptions import InvalidDateRange, ValidationError
from .money import Number, to_decimal


def require_positive(value: Number, field_name: str) -> Decimal:
    d = to_decimal(value, field_name)
    if d <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return d


def require_non_negative(value: Number, field_name: str) -> Decimal:
    d = to_decimal(value, field_name)
    if d < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return d


def require_date_order(start: date, end: date, *, what: str = "date range") -> None:
    if end < start:
        raise InvalidDateRange(f"Invalid {what}: {end.isoformat()} is before {start.isoformat()}")
