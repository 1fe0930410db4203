from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.datetime_utils import inclusive_days
from ..common.validators import require_date_order
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WageRecord:
    """Earnings of one employee over one closed period (both ends inclusive)."""

    employee_id: int
    period_start: date
    period_end: date
    amount: Decimal

    def __post_init__(self) -> None:
        require_date_order(self.period_start, self.period_end, what="wage period")
        if self.amount < 0:
            raise ValidationError("Wage amount must not be negative")

    @property
    def days(self) -> int:
        return inclusive_days(self.period_start, self.period_end)
