from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from ...policy.model import PolicySettings


class AccrualCalculator(ABC):
    """Calculator interface (Strategy Pattern for vacation accrual)."""

    @abstractmethod
    def compute_accrued_days(
        self,
        employee_id: int,
        hire_date: date,
        as_of_date: date,
        settings: PolicySettings,
    ) -> Decimal:
        raise NotImplementedError
