from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import WageRecord


class WageHistoryProvider(Protocol):
    def get_wage_records(self, employee_id: int, *, start: date, end: date) -> Sequence[WageRecord]:
        """Records of ``employee_id`` whose period overlaps [start, end]."""

        raise NotImplementedError
