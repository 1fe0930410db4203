from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall
from .model import VacationPayment
from .repository import VacationPaymentRepository


class MySQLVacationPaymentRepository(VacationPaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, request_id: int, employee_id: int, amount: Decimal, payment_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_payments(request_id, employee_id, amount, payment_date)
                VALUES(%s,%s,%s,%s)
                """,
                (int(request_id), int(employee_id), amount, payment_date),
            )
            return int(cur.lastrowid)

    def list_until(self, *, as_of_date: date) -> Sequence[VacationPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payment_id, request_id, employee_id, amount, payment_date
                FROM vacation_payments
                WHERE payment_date <= %s
                ORDER BY employee_id ASC, payment_date ASC
                """,
                (as_of_date,),
            )
            return [
                VacationPayment(
                    payment_id=int(r["payment_id"]),
                    request_id=int(r["request_id"]),
                    employee_id=int(r["employee_id"]),
                    amount=as_decimal(r["amount"]),
                    payment_date=as_date(r["payment_date"]),
                )
                for r in fetchall(cur)
            ]
