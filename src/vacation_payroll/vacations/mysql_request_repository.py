from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall, fetchone
from .model import VacationRequest
from .repository import VacationRequestRepository

_COLUMNS = "request_id, employee_id, start_date, end_date, days_count, payment_amount, status, created_at"


def _to_request(r: Dict[str, Any]) -> VacationRequest:
    return VacationRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        start_date=as_date(r["start_date"]),
        end_date=as_date(r["end_date"]),
        days_count=as_decimal(r["days_count"]),
        payment_amount=as_decimal(r["payment_amount"]),
        status=RequestStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLVacationRequestRepository(VacationRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        days_count: Decimal,
        payment_amount: Decimal,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_requests(employee_id, start_date, end_date, days_count, payment_amount, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), start_date, end_date, days_count, payment_amount, RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get(self, *, request_id: int) -> Optional[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM vacation_requests WHERE request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _to_request(r) if r else None

    def list_for_employee(self, *, employee_id: int) -> Sequence[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM vacation_requests WHERE employee_id=%s ORDER BY start_date DESC",
                (int(employee_id),),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def list_by_status(self, *, status: Optional[RequestStatus] = None, limit: int = 200) -> Sequence[VacationRequest]:
        clauses = []
        params: list[object] = []
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM vacation_requests {where} ORDER BY start_date DESC LIMIT %s",
                tuple(params),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def set_status(
        self, *, request_id: int, status: RequestStatus, from_status: RequestStatus = RequestStatus.PENDING
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE vacation_requests SET status=%s WHERE request_id=%s AND status=%s",
                (status.value, int(request_id), from_status.value),
            )
            return cur.rowcount > 0
