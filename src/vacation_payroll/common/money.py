from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ..core.constants import CURRENCY_QUANTUM
from ..core.exceptions import ValidationError

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number, field_name: str = "value") -> Decimal:
    """Convert user/DB input to Decimal without float noise (``0.1`` stays ``0.1``)."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, Decimal):
        d = value
    else:
        try:
            d = Decimal(str(value).strip().replace(",", "."))
        except (InvalidOperation, ValueError):
            raise ValidationError(f"{field_name} must be a number")
    if not d.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    return d


def round_currency(value: Decimal) -> Decimal:
    """Round half-up to cents. Apply once, on the final amount."""
    return value.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)
