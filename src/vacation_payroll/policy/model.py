from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Mapping

from ..common.money import to_decimal
from ..core.constants import (
    DEFAULT_CALCULATION_PERIOD_MONTHS,
    DEFAULT_DAYS_PER_YEAR,
    DEFAULT_MAX_CONSECUTIVE_DAYS,
    DEFAULT_MIN_DAYS_PER_REQUEST,
    DEFAULT_VACATION_COEFFICIENT,
)
from ..core.exceptions import ValidationError


_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _is_positive_decimal(value: Any) -> bool:
    return isinstance(value, Decimal) and value.is_finite() and value > 0


def _as_flag(value: Any, field_name: str) -> bool:
    """Form fields and env vars arrive as strings; "false" must stay False."""
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
        raise ValidationError(f"{field_name} must be true or false")
    return bool(value)


@dataclass(frozen=True)
class PolicySettings:
    """Immutable snapshot of the vacation policy.

    Passed explicitly into every calculation; a new instance replaces the old
    one on administrative update, so a calculation never sees half an update.
    """

    calculation_period_months: int = DEFAULT_CALCULATION_PERIOD_MONTHS
    vacation_coefficient: Decimal = DEFAULT_VACATION_COEFFICIENT
    default_days_per_year: Decimal = DEFAULT_DAYS_PER_YEAR
    accrual_cap_enabled: bool = False
    min_days_per_request: int = DEFAULT_MIN_DAYS_PER_REQUEST
    max_consecutive_days: int = DEFAULT_MAX_CONSECUTIVE_DAYS

    def __post_init__(self) -> None:
        if not isinstance(self.calculation_period_months, int) or self.calculation_period_months <= 0:
            raise ValidationError("calculation_period_months must be a positive integer")
        if not _is_positive_decimal(self.vacation_coefficient):
            raise ValidationError("vacation_coefficient must be a positive Decimal")
        if not _is_positive_decimal(self.default_days_per_year):
            raise ValidationError("default_days_per_year must be a positive Decimal")
        if self.min_days_per_request < 1:
            raise ValidationError("min_days_per_request must be at least 1")
        if self.max_consecutive_days < self.min_days_per_request:
            raise ValidationError("max_consecutive_days must be >= min_days_per_request")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PolicySettings":
        """Build from a DB row, JSON body or settings dict; missing keys take defaults."""
        try:
            return cls(
                calculation_period_months=int(data.get("calculation_period_months", DEFAULT_CALCULATION_PERIOD_MONTHS)),
                vacation_coefficient=to_decimal(
                    data.get("vacation_coefficient", DEFAULT_VACATION_COEFFICIENT), "vacation_coefficient"
                ),
                default_days_per_year=to_decimal(
                    data.get("default_days_per_year", DEFAULT_DAYS_PER_YEAR), "default_days_per_year"
                ),
                accrual_cap_enabled=_as_flag(data.get("accrual_cap_enabled", False), "accrual_cap_enabled"),
                min_days_per_request=int(data.get("min_days_per_request", DEFAULT_MIN_DAYS_PER_REQUEST)),
                max_consecutive_days=int(data.get("max_consecutive_days", DEFAULT_MAX_CONSECUTIVE_DAYS)),
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid policy settings: {e}")

    def to_dict(self) -> dict:
        out = asdict(self)
        out["vacation_coefficient"] = str(self.vacation_coefficient)
        out["default_days_per_year"] = str(self.default_days_per_year)
        return out
