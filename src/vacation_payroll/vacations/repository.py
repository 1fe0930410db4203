from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import VacationPayment, VacationRequest


class VacationRequestRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        days_count: Decimal,
        payment_amount: Decimal,
    ) -> int:
        raise NotImplementedError

    def get(self, *, request_id: int) -> Optional[VacationRequest]:
        raise NotImplementedError

    def list_for_employee(self, *, employee_id: int) -> Sequence[VacationRequest]:
        """Newest first."""

        raise NotImplementedError

    def list_by_status(self, *, status: Optional[RequestStatus] = None, limit: int = 200) -> Sequence[VacationRequest]:
        raise NotImplementedError

    def set_status(
        self, *, request_id: int, status: RequestStatus, from_status: RequestStatus = RequestStatus.PENDING
    ) -> bool:
        """Move a request in ``from_status`` to ``status``. False when it was in another status."""

        raise NotImplementedError


class VacationPaymentRepository(Protocol):
    def create(self, *, request_id: int, employee_id: int, amount: Decimal, payment_date: date) -> int:
        raise NotImplementedError

    def list_until(self, *, as_of_date: date) -> Sequence[VacationPayment]:
        """Payments dated on or before ``as_of_date``."""

        raise NotImplementedError
