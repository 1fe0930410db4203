from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import inclusive_days
from ..common.money import Number
from ..common.validators import require_date_order, require_positive
from ..core.enums import RequestStatus
from ..core.exceptions import DomainError, EmployeeNotFound, ValidationError
from ..core.outcome import Outcome
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..policy.model import PolicySettings
from ..policy.service import PolicyService
from ..wages.repository import WageHistoryProvider
from .aggregator import VacationTotalsAggregator
from .calculator.accrual import DailyAccrualCalculator
from .calculator.average_wage import AverageWageCalculator
from .calculator.base import AccrualCalculator
from .calculator.payout import PayoutCalculator
from .model import (
    EmployeeVacationTotal,
    PayoutQuote,
    VacationBalance,
    VacationQuery,
    VacationRequest,
    VacationTotalsSummary,
)
from .repository import VacationPaymentRepository, VacationRequestRepository
from .scheduling import MonthlyVacationPay, split_monthly_vacation_pay

logger = logging.getLogger(__name__)


class VacationService:
    """Entry point of the presentation layer.

    Fetches policy and history once per call, runs the pure calculators and
    hands back an ``Outcome``; domain errors never leave this class as
    exceptions.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        wages: WageHistoryProvider,
        requests: VacationRequestRepository,
        payments: VacationPaymentRepository,
        policy: PolicyService,
        *,
        accrual_calculator: Optional[AccrualCalculator] = None,
        payout_calculator: Optional[PayoutCalculator] = None,
        aggregator: Optional[VacationTotalsAggregator] = None,
    ):
        self._employees = employees
        self._requests = requests
        self._payments = payments
        self._policy = policy
        self._average_wage = AverageWageCalculator(wages)
        self._accrual = accrual_calculator or DailyAccrualCalculator()
        self._payout = payout_calculator or PayoutCalculator()
        self._aggregator = aggregator or VacationTotalsAggregator()

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise EmployeeNotFound(int(employee_id))
        return employee

    def _balance(self, employee: Employee, as_of_date: date, settings: PolicySettings) -> VacationBalance:
        accrued = self._accrual.compute_accrued_days(employee.employee_id, employee.hire_date, as_of_date, settings)

        used = Decimal("0")
        scheduled = Decimal("0")
        for req in self._requests.list_for_employee(employee_id=employee.employee_id):
            if req.status == RequestStatus.APPROVED and req.start_date <= as_of_date:
                used += req.days_count
            elif req.status != RequestStatus.REJECTED:
                scheduled += req.days_count

        return VacationBalance(
            employee_id=employee.employee_id,
            as_of_date=as_of_date,
            days_accrued=accrued,
            days_used=used,
            days_scheduled=scheduled,
            days_cap=settings.default_days_per_year if settings.accrual_cap_enabled else None,
        )

    def _quote(self, employee: Employee, query: VacationQuery, settings: PolicySettings) -> PayoutQuote:
        start_date, days = query.as_of_date, query.requested_days
        balance = self._balance(employee, start_date, settings)
        available = max(balance.days_remaining, Decimal("0"))
        avg = self._average_wage.compute_average_daily_wage(employee.employee_id, start_date, settings)
        amount = self._payout.compute_payout(
            employee.employee_id, days, avg.daily_wage, settings, accrued_days=available
        )
        return PayoutQuote(
            employee_id=employee.employee_id,
            days=days,
            average_daily_wage=avg.daily_wage,
            accrued_days=balance.days_accrued,
            available_days=available,
            amount=amount,
            period_start=avg.window_start,
            period_end=avg.window_end,
            warnings=avg.warnings,
        )

    def get_vacation_totals(self, as_of_date: date) -> Outcome[VacationTotalsSummary]:
        """Recorded vacation payments up to ``as_of_date``, one line per employee."""
        try:
            per_employee: dict[int, Decimal] = {}
            for p in self._payments.list_until(as_of_date=as_of_date):
                per_employee[p.employee_id] = per_employee.get(p.employee_id, Decimal("0")) + p.amount

            totals = []
            for employee_id, amount in per_employee.items():
                employee = self._employees.get_by_id(employee_id)
                name = employee.full_name if employee else f"Employee #{employee_id}"
                totals.append(EmployeeVacationTotal(employee_id=employee_id, employee_name=name, amount=amount))

            return Outcome.ready(self._aggregator.aggregate(totals))
        except DomainError as e:
            logger.info("Vacation totals as of %s rejected: %s", as_of_date, e)
            return Outcome.failed(e)

    def get_accrual_liability(self, as_of_date: date) -> Outcome[VacationTotalsSummary]:
        """What paying out every active employee's remaining days would cost."""
        try:
            settings = self._policy.get_settings()
            totals = []
            for employee in self._employees.list_active():
                if employee.hire_date > as_of_date:
                    continue
                balance = self._balance(employee, as_of_date, settings)
                remaining = max(balance.days_remaining, Decimal("0"))
                avg = self._average_wage.compute_average_daily_wage(employee.employee_id, as_of_date, settings)
                amount = self._payout.compute_payout(
                    employee.employee_id, remaining, avg.daily_wage, settings, accrued_days=remaining
                )
                if avg.warnings:
                    logger.warning(
                        "Liability of employee=%s computed with warnings %s",
                        employee.employee_id,
                        [w.value for w in avg.warnings],
                    )
                totals.append(
                    EmployeeVacationTotal(
                        employee_id=employee.employee_id,
                        employee_name=employee.full_name,
                        amount=amount,
                        warnings=avg.warnings,
                    )
                )
            return Outcome.ready(self._aggregator.aggregate(totals))
        except DomainError as e:
            logger.info("Accrual liability as of %s rejected: %s", as_of_date, e)
            return Outcome.failed(e)

    def get_balance(self, employee_id: int, as_of_date: date) -> Outcome[VacationBalance]:
        try:
            employee = self._get_employee(employee_id)
            return Outcome.ready(self._balance(employee, as_of_date, self._policy.get_settings()))
        except DomainError as e:
            return Outcome.failed(e)

    def quote_vacation_pay(self, employee_id: int, start_date: date, days_count: Number) -> Outcome[PayoutQuote]:
        try:
            employee = self._get_employee(employee_id)
            days = require_positive(days_count, "days_count")
            query = VacationQuery(employee.employee_id, start_date, days)
            return Outcome.ready(self._quote(employee, query, self._policy.get_settings()))
        except DomainError as e:
            logger.info("Vacation pay quote for employee=%s rejected: %s", employee_id, e)
            return Outcome.failed(e)

    def create_vacation_request(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        days_count: Number,
    ) -> Outcome[VacationRequest]:
        try:
            employee = self._get_employee(employee_id)
            require_date_order(start_date, end_date, what="vacation period")
            days = require_positive(days_count, "days_count")
            settings = self._policy.get_settings()

            if days < settings.min_days_per_request:
                raise ValidationError(f"A vacation must be at least {settings.min_days_per_request} days long")
            if days > settings.max_consecutive_days:
                raise ValidationError(f"A vacation cannot exceed {settings.max_consecutive_days} consecutive days")
            if days > inclusive_days(start_date, end_date):
                raise ValidationError("days_count is longer than the vacation period")

            quote = self._quote(employee, VacationQuery(employee.employee_id, start_date, days), settings)
            if quote.warnings:
                logger.warning(
                    "Vacation request for employee=%s priced with warnings %s",
                    employee.employee_id,
                    [w.value for w in quote.warnings],
                )

            request_id = self._requests.create(
                employee_id=employee.employee_id,
                start_date=start_date,
                end_date=end_date,
                days_count=days,
                payment_amount=quote.amount,
            )
            logger.info("Vacation request %s created for employee=%s amount=%s", request_id, employee_id, quote.amount)
            return Outcome.ready(self._requests.get(request_id=request_id))
        except DomainError as e:
            logger.info("Vacation request for employee=%s rejected: %s", employee_id, e)
            return Outcome.failed(e)

    def approve_request(self, request_id: int) -> Outcome[VacationRequest]:
        """Approve a pending request and record its payment, dated the first day of the vacation."""
        try:
            req = self._requests.get(request_id=int(request_id))
            if not req:
                raise ValidationError(f"Vacation request {request_id} does not exist")
            if req.status != RequestStatus.PENDING:
                raise ValidationError(f"Vacation request {request_id} was already {req.status.value.lower()}")

            if not self._requests.set_status(request_id=req.request_id, status=RequestStatus.APPROVED):
                raise ValidationError(f"Vacation request {request_id} could not be approved")

            try:
                self._payments.create(
                    request_id=req.request_id,
                    employee_id=req.employee_id,
                    amount=req.payment_amount,
                    payment_date=req.start_date,
                )
            except Exception:
                # An approved request must have its payment; put it back in the queue.
                self._requests.set_status(
                    request_id=req.request_id, status=RequestStatus.PENDING, from_status=RequestStatus.APPROVED
                )
                logger.exception("Recording payment for vacation request %s failed, approval undone", request_id)
                raise
            return Outcome.ready(self._requests.get(request_id=req.request_id))
        except DomainError as e:
            return Outcome.failed(e)

    def reject_request(self, request_id: int) -> Outcome[VacationRequest]:
        try:
            if not self._requests.set_status(request_id=int(request_id), status=RequestStatus.REJECTED):
                raise ValidationError(f"Vacation request {request_id} is not pending")
            return Outcome.ready(self._requests.get(request_id=int(request_id)))
        except DomainError as e:
            return Outcome.failed(e)

    def list_requests(self, *, status: Optional[RequestStatus] = None, limit: int = 200) -> Sequence[VacationRequest]:
        return self._requests.list_by_status(status=status, limit=limit)

    def monthly_vacation_pay(
        self,
        *,
        employee_id: int,
        year: int,
        month: int,
        salary_payment_day: int,
    ) -> Outcome[MonthlyVacationPay]:
        try:
            self._get_employee(employee_id)
            return Outcome.ready(
                split_monthly_vacation_pay(
                    self._requests.list_for_employee(employee_id=int(employee_id)),
                    year=year,
                    month=month,
                    salary_payment_day=salary_payment_day,
                )
            )
        except DomainError as e:
            return Outcome.failed(e)
