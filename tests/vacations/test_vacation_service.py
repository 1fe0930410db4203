from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from vacation_payroll.core.enums import ErrorCode, OutcomeState, RequestStatus
from vacation_payroll.core.outcome import Outcome
from vacation_payroll.employees.model import Employee
from vacation_payroll.policy.model import PolicySettings

from .conftest import JANE, JOHN


def test_quote_uses_average_wage_and_available_days(backend):
    outcome = backend.service.quote_vacation_pay(1, date(2025, 6, 1), 10)

    assert outcome.state == OutcomeState.READY
    quote = outcome.value
    assert quote.average_daily_wage == Decimal("100")
    assert quote.amount == Decimal("1000.00")
    assert quote.accrued_days == Decimal(882) * Decimal("24") / 365
    assert (quote.period_start, quote.period_end) == (date(2024, 6, 1), date(2025, 6, 1))
    assert quote.warnings == ()


def test_quote_for_unknown_employee_fails(backend):
    outcome = backend.service.quote_vacation_pay(99, date(2025, 6, 1), 10)

    assert outcome.is_failed
    assert outcome.error.code == ErrorCode.EMPLOYEE_NOT_FOUND


def test_quote_beyond_accrual_fails_without_raising(backend):
    outcome = backend.service.quote_vacation_pay(1, date(2025, 6, 1), 100)

    assert outcome.is_failed
    assert outcome.error.code == ErrorCode.INSUFFICIENT_ACCRUAL


def test_quote_without_wage_history_is_zero_with_warning(backend):
    outcome = backend.service.quote_vacation_pay(JANE.employee_id, date(2025, 6, 1), 5)

    assert outcome.is_ready
    assert outcome.value.amount == 0
    assert outcome.value.warnings == (ErrorCode.NO_WAGE_HISTORY,)


def test_request_lifecycle_feeds_totals(backend):
    svc = backend.service

    created = svc.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 6, 14), days_count=14
    )
    assert created.is_ready
    assert created.value.status == RequestStatus.PENDING
    assert created.value.payment_amount == Decimal("1400.00")

    pending_balance = svc.get_balance(1, date(2025, 6, 1)).value
    assert pending_balance.days_scheduled == 14
    assert pending_balance.days_used == 0

    approved = svc.approve_request(created.value.request_id)
    assert approved.value.status == RequestStatus.APPROVED
    assert svc.get_balance(1, date(2025, 6, 1)).value.days_used == 14

    totals = svc.get_vacation_totals(date(2025, 6, 30)).value
    assert totals.total_amount == Decimal("1400.00")
    assert [(t.employee_id, t.employee_name) for t in totals.employee_totals] == [(1, "John Doe")]

    before = svc.get_vacation_totals(date(2025, 5, 31)).value
    assert before.total_amount == 0
    assert before.employee_totals == ()


def test_totals_sum_payments_per_employee(backend):
    svc = backend.service
    for start in (date(2025, 6, 2), date(2025, 6, 16)):
        req = svc.create_vacation_request(employee_id=1, start_date=start, end_date=start, days_count=1).value
        svc.approve_request(req.request_id)

    totals = svc.get_vacation_totals(date(2025, 12, 31)).value

    assert len(totals.employee_totals) == 1
    assert totals.total_amount == Decimal("200.00")


def test_totals_name_unknown_employees(backend):
    backend.payments.create(request_id=1, employee_id=9, amount=Decimal("10"), payment_date=date(2025, 1, 1))

    totals = backend.service.get_vacation_totals(date(2025, 1, 31)).value

    assert totals.employee_totals[0].employee_name == "Employee #9"


def test_request_longer_than_policy_allows_is_rejected(backend):
    outcome = backend.service.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 7, 1), days_count=31
    )

    assert outcome.is_failed
    assert outcome.error.code == ErrorCode.VALIDATION_ERROR
    assert backend.requests.list_by_status() == []


def test_request_with_inverted_dates_is_rejected(backend):
    outcome = backend.service.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 10), end_date=date(2025, 6, 1), days_count=3
    )

    assert outcome.error.code == ErrorCode.INVALID_DATE_RANGE


def test_request_with_more_days_than_period_is_rejected(backend):
    outcome = backend.service.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 6, 5), days_count=10
    )

    assert outcome.is_failed


def test_request_cannot_be_approved_twice(backend):
    svc = backend.service
    req = svc.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 6, 3), days_count=3
    ).value

    assert svc.approve_request(req.request_id).is_ready
    second = svc.approve_request(req.request_id)

    assert second.is_failed
    assert len(backend.payments.items) == 1


def test_rejected_request_frees_days_and_records_no_payment(backend):
    svc = backend.service
    req = svc.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 6, 3), days_count=3
    ).value

    rejected = svc.reject_request(req.request_id)

    assert rejected.value.status == RequestStatus.REJECTED
    assert svc.get_balance(1, date(2025, 6, 1)).value.days_scheduled == 0
    assert backend.payments.items == []
    assert svc.reject_request(req.request_id).is_failed


def test_liability_pays_out_remaining_days(make_backend):
    newcomer = Employee(employee_id=3, first_name="New", last_name="Hire", hire_date=date(2025, 7, 1))
    backend = make_backend(employees=(JOHN, JANE, newcomer))

    summary = backend.service.get_accrual_liability(date(2025, 6, 1)).value

    assert [t.employee_id for t in summary.employee_totals] == [1, 2]
    assert summary.employee_totals[0].amount == Decimal("5799.45")
    assert summary.employee_totals[1].amount == 0
    assert summary.total_amount == Decimal("5799.45")


def test_cap_limits_rolled_over_balance(make_backend):
    veteran = Employee(employee_id=5, first_name="Old", last_name="Timer", hire_date=date(2020, 1, 1))
    backend = make_backend(employees=(veteran,), wages=(), settings=PolicySettings(accrual_cap_enabled=True))

    balance = backend.service.get_balance(5, date(2025, 6, 1)).value

    assert balance.days_accrued > 100
    assert balance.days_remaining == Decimal("24")


def test_uncapped_balance_rolls_over(make_backend):
    veteran = Employee(employee_id=5, first_name="Old", last_name="Timer", hire_date=date(2020, 1, 1))
    backend = make_backend(employees=(veteran,), wages=())

    balance = backend.service.get_balance(5, date(2025, 6, 1)).value

    assert balance.days_remaining == balance.days_accrued


def test_monthly_pay_split(backend):
    svc = backend.service
    req = svc.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 3), end_date=date(2025, 6, 9), days_count=7
    ).value
    svc.approve_request(req.request_id)

    pay = svc.monthly_vacation_pay(employee_id=1, year=2025, month=6, salary_payment_day=5).value

    assert pay.next_month == Decimal("700.00")
    assert pay.current_month == 0


def test_monthly_pay_for_unknown_employee_fails(backend):
    outcome = backend.service.monthly_vacation_pay(employee_id=42, year=2025, month=6, salary_payment_day=5)

    assert outcome.error.code == ErrorCode.EMPLOYEE_NOT_FOUND


def test_pending_outcome_carries_no_data():
    outcome = Outcome.pending()

    assert outcome.state == OutcomeState.PENDING
    assert outcome.value is None and outcome.error is None


@pytest.mark.parametrize("days", ["NaN", "Infinity"])
def test_quote_with_non_finite_days_fails_as_validation(backend, days):
    outcome = backend.service.quote_vacation_pay(1, date(2025, 6, 1), days)

    assert outcome.is_failed
    assert outcome.error.code == ErrorCode.VALIDATION_ERROR


def test_failed_payment_undoes_approval(backend):
    svc = backend.service
    req = svc.create_vacation_request(
        employee_id=1, start_date=date(2025, 6, 1), end_date=date(2025, 6, 3), days_count=3
    ).value

    working_create = backend.payments.create

    def broken_create(**kwargs):
        raise RuntimeError("connection lost")

    backend.payments.create = broken_create
    with pytest.raises(RuntimeError):
        svc.approve_request(req.request_id)

    assert backend.requests.get(request_id=req.request_id).status == RequestStatus.PENDING
    assert backend.payments.items == []

    backend.payments.create = working_create
    assert svc.approve_request(req.request_id).is_ready
    assert svc.get_vacation_totals(date(2025, 6, 30)).value.total_amount == Decimal("300.00")


def test_liability_flags_employees_without_wage_history(backend):
    summary = backend.service.get_accrual_liability(date(2025, 6, 1)).value

    warnings = {t.employee_id: t.warnings for t in summary.employee_totals}
    assert warnings == {1: (), 2: (ErrorCode.NO_WAGE_HISTORY,)}


def test_monthly_pay_with_invalid_year_fails(backend):
    outcome = backend.service.monthly_vacation_pay(employee_id=1, year=0, month=6, salary_payment_day=5)

    assert outcome.is_failed
    assert outcome.error.code == ErrorCode.VALIDATION_ERROR
