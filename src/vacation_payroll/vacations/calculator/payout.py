from __future__ import annotations

import logging
from decimal import Decimal

from ...common.money import Number, round_currency
from ...common.validators import require_non_negative
from ...core.exceptions import InsufficientAccrual
from ...policy.model import PolicySettings

logger = logging.getLogger(__name__)


class PayoutCalculator:
    """payout = days * average daily wage * vacation coefficient, rounded once to cents."""

    def compute_payout(
        self,
        employee_id: int,
        days_to_payout: Number,
        avg_daily_wage: Number,
        settings: PolicySettings,
        *,
        accrued_days: Number,
    ) -> Decimal:
        days = require_non_negative(days_to_payout, "days_to_payout")
        wage = require_non_negative(avg_daily_wage, "avg_daily_wage")
        available = require_non_negative(accrued_days, "accrued_days")

        if days > available:
            raise InsufficientAccrual(
                f"Employee {employee_id} requested {days} days but only {available:.2f} are available",
                requested=days,
                available=available,
            )

        amount = round_currency(days * wage * settings.vacation_coefficient)
        logger.debug("employee=%s days=%s wage=%s payout=%s", employee_id, days, wage, amount)
        return amount
