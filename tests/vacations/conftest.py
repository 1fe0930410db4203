from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from vacation_payroll.common.datetime_utils import overlap
from vacation_payroll.core.enums import RequestStatus
from vacation_payroll.employees.model import Employee
from vacation_payroll.policy.model import PolicySettings
from vacation_payroll.policy.service import PolicyService
from vacation_payroll.vacations.model import VacationPayment, VacationRequest
from vacation_payroll.vacations.service import VacationService
from vacation_payroll.wages.model import WageRecord


class InMemoryEmployees:
    def __init__(self, employees):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_active(self):
        return sorted((e for e in self._by_id.values() if e.is_active), key=lambda e: e.employee_id)


class InMemoryWages:
    def __init__(self, records):
        self.records = list(records)
        self.calls = []

    def get_wage_records(self, employee_id: int, *, start: date, end: date):
        self.calls.append((employee_id, start, end))
        return [
            r
            for r in self.records
            if r.employee_id == employee_id and overlap(r.period_start, r.period_end, start, end)
        ]


class InMemorySettings:
    def __init__(self, settings: Optional[PolicySettings] = None):
        self.settings = settings
        self.upserts = 0

    def get(self):
        return self.settings

    def upsert(self, settings):
        self.settings = settings
        self.upserts += 1


class InMemoryRequests:
    def __init__(self):
        self._next_id = 1
        self._by_id: dict[int, VacationRequest] = {}

    def create(self, *, employee_id, start_date, end_date, days_count, payment_amount):
        rid = self._next_id
        self._next_id += 1
        self._by_id[rid] = VacationRequest(
            request_id=rid,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            days_count=Decimal(days_count),
            payment_amount=payment_amount,
            status=RequestStatus.PENDING,
        )
        return rid

    def get(self, *, request_id):
        return self._by_id.get(int(request_id))

    def list_for_employee(self, *, employee_id):
        items = [r for r in self._by_id.values() if r.employee_id == employee_id]
        return sorted(items, key=lambda r: r.start_date, reverse=True)

    def list_by_status(self, *, status=None, limit=200):
        items = [r for r in self._by_id.values() if status is None or r.status == status]
        return sorted(items, key=lambda r: r.start_date, reverse=True)[:limit]

    def set_status(self, *, request_id, status, from_status=RequestStatus.PENDING):
        req = self._by_id.get(int(request_id))
        if not req or req.status != from_status:
            return False
        self._by_id[req.request_id] = VacationRequest(
            request_id=req.request_id,
            employee_id=req.employee_id,
            start_date=req.start_date,
            end_date=req.end_date,
            days_count=req.days_count,
            payment_amount=req.payment_amount,
            status=status,
        )
        return True


class InMemoryPayments:
    def __init__(self):
        self.items: list[VacationPayment] = []

    def create(self, *, request_id, employee_id, amount, payment_date):
        pid = len(self.items) + 1
        self.items.append(
            VacationPayment(
                payment_id=pid,
                request_id=request_id,
                employee_id=employee_id,
                amount=amount,
                payment_date=payment_date,
            )
        )
        return pid

    def list_until(self, *, as_of_date):
        return [p for p in self.items if p.payment_date <= as_of_date]


JOHN = Employee(employee_id=1, first_name="John", last_name="Doe", hire_date=date(2023, 1, 1))
JANE = Employee(employee_id=2, first_name="Jane", last_name="Smith", hire_date=date(2024, 1, 1))

# 365 days at 100 per day.
JOHN_WAGES = WageRecord(
    employee_id=1, period_start=date(2024, 6, 1), period_end=date(2025, 5, 31), amount=Decimal("36500")
)


class Backend:
    def __init__(self, *, employees=(JOHN, JANE), wages=(JOHN_WAGES,), settings: Optional[PolicySettings] = None):
        self.employees = InMemoryEmployees(employees)
        self.wages = InMemoryWages(wages)
        self.settings = InMemorySettings(settings)
        self.requests = InMemoryRequests()
        self.payments = InMemoryPayments()
        self.policy = PolicyService(self.settings)
        self.service = VacationService(
            self.employees,
            self.wages,
            self.requests,
            self.payments,
            self.policy,
        )


@pytest.fixture
def backend():
    return Backend()


@pytest.fixture
def make_backend():
    return Backend
