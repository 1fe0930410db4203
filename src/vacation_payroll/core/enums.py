from __future__ import annotations

from enum import Enum


class RequestStatus(str, Enum):
    """Approval state of a vacation request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ErrorCode(str, Enum):
    """Machine-readable codes surfaced to the calling layer."""

    NO_WAGE_HISTORY = "NO_WAGE_HISTORY"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INSUFFICIENT_ACCRUAL = "INSUFFICIENT_ACCRUAL"
    DUPLICATE_EMPLOYEE_ENTRY = "DUPLICATE_EMPLOYEE_ENTRY"
    OVERLAPPING_WAGE_PERIODS = "OVERLAPPING_WAGE_PERIODS"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class OutcomeState(str, Enum):
    PENDING = "PENDING"
    READY = "READY"
    FAILED = "FAILED"
