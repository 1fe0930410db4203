from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def subtract_months(value: date, months: int) -> date:
    """Go back ``months`` calendar months, clamping to the end of shorter months."""
    total = value.year * 12 + (value.month - 1) - int(months)
    year, month = divmod(total, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days in [start, end]; 0 when end < start."""
    return max((end - start).days + 1, 0)


def overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> Optional[tuple[date, date]]:
    start = max(start_a, start_b)
    end = min(end_a, end_b)
    if end < start:
        return None
    return start, end


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)
