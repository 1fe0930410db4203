from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import ErrorCode, RequestStatus


@dataclass(frozen=True)
class VacationQuery:
    """Input of one payout calculation."""

    employee_id: int
    as_of_date: date
    requested_days: Decimal


@dataclass(frozen=True)
class AverageWage:
    employee_id: int
    daily_wage: Decimal
    window_start: date
    window_end: date
    covered_days: int
    warnings: tuple[ErrorCode, ...] = ()

    @property
    def has_history(self) -> bool:
        return ErrorCode.NO_WAGE_HISTORY not in self.warnings


@dataclass(frozen=True)
class PayoutQuote:
    employee_id: int
    days: Decimal
    average_daily_wage: Decimal
    accrued_days: Decimal
    available_days: Decimal
    amount: Decimal
    period_start: date
    period_end: date
    warnings: tuple[ErrorCode, ...] = ()

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "days": str(self.days),
            "average_daily_wage": str(self.average_daily_wage),
            "accrued_days": str(self.accrued_days),
            "available_days": str(self.available_days),
            "amount": str(self.amount),
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "warnings": [w.value for w in self.warnings],
        }


@dataclass(frozen=True)
class EmployeeVacationTotal:
    employee_id: int
    employee_name: str
    amount: Decimal
    warnings: tuple[ErrorCode, ...] = ()

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "amount": str(self.amount),
            "warnings": [w.value for w in self.warnings],
        }


@dataclass(frozen=True)
class VacationTotalsSummary:
    total_amount: Decimal = Decimal("0")
    employee_totals: tuple[EmployeeVacationTotal, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "total_amount": str(self.total_amount),
            "employee_totals": [t.to_dict() for t in self.employee_totals],
        }


@dataclass(frozen=True)
class VacationRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    days_count: Decimal
    payment_amount: Decimal
    status: RequestStatus
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "request_id": self.request_id,
            "employee_id": self.employee_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "days_count": str(self.days_count),
            "payment_amount": str(self.payment_amount),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class VacationPayment:
    payment_id: int
    request_id: int
    employee_id: int
    amount: Decimal
    payment_date: date


@dataclass(frozen=True)
class VacationBalance:
    employee_id: int
    as_of_date: date
    days_accrued: Decimal
    days_used: Decimal
    days_scheduled: Decimal
    # Roll-over limit; None when unused days carry over without bound.
    days_cap: Optional[Decimal] = None

    @property
    def days_remaining(self) -> Decimal:
        remaining = self.days_accrued - self.days_used - self.days_scheduled
        if self.days_cap is not None:
            return min(remaining, self.days_cap)
        return remaining

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "as_of_date": self.as_of_date.isoformat(),
            "days_accrued": str(self.days_accrued),
            "days_used": str(self.days_used),
            "days_scheduled": str(self.days_scheduled),
            "days_remaining": str(self.days_remaining),
        }
