from __future__ import annotations

import logging
import math
from datetime import date
from decimal import Decimal

from ...common.validators import require_date_order
from ...core.constants import ACCRUAL_DAYS_BASIS
from ...policy.model import PolicySettings
from .base import AccrualCalculator

logger = logging.getLogger(__name__)


class DailyAccrualCalculator(AccrualCalculator):
    """Standard rule: days employed * days per year / 365.

    The year is always 365 days long, leap or not, so the same inputs give
    the same result on every recomputation. With ``accrual_cap_enabled`` the
    balance is capped at one year's allotment per started year of tenure.
    """

    def compute_accrued_days(
        self,
        employee_id: int,
        hire_date: date,
        as_of_date: date,
        settings: PolicySettings,
    ) -> Decimal:
        require_date_order(hire_date, as_of_date, what="employment period")

        days_employed = (as_of_date - hire_date).days
        accrued = Decimal(days_employed) * settings.default_days_per_year / ACCRUAL_DAYS_BASIS

        if settings.accrual_cap_enabled:
            started_years = math.ceil(days_employed / ACCRUAL_DAYS_BASIS)
            accrued = min(accrued, settings.default_days_per_year * started_years)

        logger.debug("employee=%s days_employed=%s accrued=%s", employee_id, days_employed, accrued)
        return accrued
