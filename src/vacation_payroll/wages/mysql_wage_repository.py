from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall
from .model import WageRecord
from .repository import WageHistoryProvider


class MySQLWageRepository(WageHistoryProvider):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_wage_records(self, employee_id: int, *, start: date, end: date) -> Sequence[WageRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, period_start, period_end, amount
                FROM wage_records
                WHERE employee_id=%s AND period_start <= %s AND period_end >= %s
                ORDER BY period_start ASC
                """,
                (int(employee_id), end, start),
            )
            return [
                WageRecord(
                    employee_id=int(r["employee_id"]),
                    period_start=as_date(r["period_start"]),
                    period_end=as_date(r["period_end"]),
                    amount=as_decimal(r["amount"]),
                )
                for r in fetchall(cur)
            ]

