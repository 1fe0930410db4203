from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Sequence

from ...common.datetime_utils import inclusive_days, overlap, subtract_months
from ...common.validators import require_date_order
from ...core.enums import ErrorCode
from ...core.exceptions import OverlappingWagePeriods
from ...policy.model import PolicySettings
from ...wages.model import WageRecord
from ...wages.repository import WageHistoryProvider
from ..model import AverageWage

logger = logging.getLogger(__name__)


def calculation_window(as_of_date: date, settings: PolicySettings) -> tuple[date, date]:
    """[as_of - N months, as_of], both ends inclusive."""
    return subtract_months(as_of_date, settings.calculation_period_months), as_of_date


def average_daily_wage(records: Sequence[WageRecord], window_start: date, window_end: date) -> tuple[Decimal, int]:
    """Return (average daily wage, covered days) over the window.

    Records partly inside the window are prorated by the share of their days
    inside it. The divisor is the number of covered days, not the window
    length, so a short history is not diluted. No coverage gives (0, 0).
    """
    require_date_order(window_start, window_end, what="calculation window")

    clipped: list[tuple[date, date, WageRecord]] = []
    for rec in records:
        part = overlap(rec.period_start, rec.period_end, window_start, window_end)
        if part:
            clipped.append((part[0], part[1], rec))

    if not clipped:
        return Decimal("0"), 0

    clipped.sort(key=lambda c: c[0])
    total = Decimal("0")
    covered = 0
    prev_end = None
    for start, end, rec in clipped:
        if prev_end is not None and start <= prev_end:
            raise OverlappingWagePeriods(
                f"Wage periods of employee {rec.employee_id} overlap on {start.isoformat()}"
            )
        days_inside = inclusive_days(start, end)
        total += rec.amount * days_inside / rec.days
        covered += days_inside
        prev_end = end

    return total / covered, covered


class AverageWageCalculator:
    def __init__(self, wages: WageHistoryProvider):
        self._wages = wages

    def compute_average_daily_wage(self, employee_id: int, as_of_date: date, settings: PolicySettings) -> AverageWage:
        window_start, window_end = calculation_window(as_of_date, settings)
        records = [
            r
            for r in self._wages.get_wage_records(int(employee_id), start=window_start, end=window_end)
            if r.employee_id == int(employee_id)
        ]

        daily, covered = average_daily_wage(records, window_start, window_end)
        warnings: tuple[ErrorCode, ...] = ()
        if covered == 0:
            logger.warning(
                "No wage history for employee=%s in %s..%s", employee_id, window_start, window_end
            )
            warnings = (ErrorCode.NO_WAGE_HISTORY,)

        return AverageWage(
            employee_id=int(employee_id),
            daily_wage=daily,
            window_start=window_start,
            window_end=window_end,
            covered_days=covered,
            warnings=warnings,
        )
