from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..common.money import round_currency, to_decimal
from ..core.exceptions import DuplicateEmployeeEntry, ValidationError
from .model import EmployeeVacationTotal, VacationTotalsSummary


class VacationTotalsAggregator:
    """Roll per-employee payouts up into the dashboard summary.

    Amounts are kept exactly as given and only the grand total is rounded, so
    aggregating ``summary.employee_totals`` again yields the same summary.
    """

    def aggregate(self, payouts: Iterable[EmployeeVacationTotal]) -> VacationTotalsSummary:
        seen: set[int] = set()
        totals: list[EmployeeVacationTotal] = []
        running = Decimal("0")

        for p in payouts:
            employee_id = int(p.employee_id)
            if employee_id in seen:
                raise DuplicateEmployeeEntry(employee_id)
            seen.add(employee_id)

            amount = to_decimal(p.amount, "amount")
            if amount < 0:
                raise ValidationError(f"Payout of employee {employee_id} must not be negative")

            totals.append(
                EmployeeVacationTotal(
                    employee_id=employee_id,
                    employee_name=p.employee_name,
                    amount=amount,
                    warnings=tuple(getattr(p, "warnings", ())),
                )
            )
            running += amount

        if not totals:
            return VacationTotalsSummary()
        return VacationTotalsSummary(total_amount=round_currency(running), employee_totals=tuple(totals))
