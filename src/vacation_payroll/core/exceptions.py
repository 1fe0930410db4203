from __future__ import annotations

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = ErrorCode.VALIDATION_ERROR


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class CalculationError(DomainError):
    """Raised by the calculators when their inputs break a contract."""


class InvalidDateRange(CalculationError):
    """An end date precedes its start date. Never clamped."""

    code = ErrorCode.INVALID_DATE_RANGE


class InsufficientAccrual(CalculationError):
    """More days requested than the employee has accrued."""

    code = ErrorCode.INSUFFICIENT_ACCRUAL

    def __init__(self, message: str, *, requested=None, available=None):
        super().__init__(message)
        self.requested = requested
        self.available = available


class DuplicateEmployeeEntry(CalculationError):
    code = ErrorCode.DUPLICATE_EMPLOYEE_ENTRY

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} appears more than once")
        self.employee_id = employee_id


class OverlappingWagePeriods(CalculationError):
    code = ErrorCode.OVERLAPPING_WAGE_PERIODS


class EmployeeNotFound(DomainError):
    code = ErrorCode.EMPLOYEE_NOT_FOUND

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} does not exist")
        self.employee_id = employee_id
