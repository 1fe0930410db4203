"""Which payroll month a vacation's pay belongs to.

Vacation pay must reach the employee before the vacation starts. A vacation
starting on or before the salary payment day of a month is therefore paid
with the previous month's payroll run.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from decimal import Decimal
from typing import Iterable

from ..common.datetime_utils import month_bounds, overlap
from ..common.money import round_currency
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from .model import VacationRequest


@dataclass(frozen=True)
class MonthlyVacationPay:
    year: int
    month: int
    current_month: Decimal
    next_month: Decimal

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "current_month": str(self.current_month),
            "next_month": str(self.next_month),
        }


def salary_payment_date(year: int, month: int, salary_payment_day: int) -> date:
    if not 1 <= int(salary_payment_day) <= 31:
        raise ValidationError("salary_payment_day must be between 1 and 31")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), min(int(salary_payment_day), last_day))


def should_pay_in_previous_month(vacation_start: date, salary_payment_day: int, reference: date) -> bool:
    return vacation_start <= salary_payment_date(reference.year, reference.month, salary_payment_day)


def split_monthly_vacation_pay(
    requests: Iterable[VacationRequest],
    *,
    year: int,
    month: int,
    salary_payment_day: int,
) -> MonthlyVacationPay:
    """Split approved vacation pay touching ``year/month`` between the two payroll runs."""
    if not MINYEAR <= int(year) <= MAXYEAR:
        raise ValidationError(f"year must be between {MINYEAR} and {MAXYEAR}")
    if not 1 <= int(month) <= 12:
        raise ValidationError("month must be between 1 and 12")
    if not 1 <= int(salary_payment_day) <= 31:
        raise ValidationError("salary_payment_day must be between 1 and 31")
    month_start, month_end = month_bounds(year, month)
    current = Decimal("0")
    advance = Decimal("0")

    for req in requests:
        if req.status != RequestStatus.APPROVED:
            continue
        if not overlap(req.start_date, req.end_date, month_start, month_end):
            continue
        if should_pay_in_previous_month(req.start_date, salary_payment_day, month_start):
            advance += req.payment_amount
        else:
            current += req.payment_amount

    return MonthlyVacationPay(
        year=int(year),
        month=int(month),
        current_month=round_currency(current),
        next_month=round_currency(advance),
    )
