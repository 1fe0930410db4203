from __future__ import annotations

from decimal import Decimal

import pytest

from vacation_payroll.core.enums import ErrorCode
from vacation_payroll.core.exceptions import DuplicateEmployeeEntry, ValidationError
from vacation_payroll.vacations.aggregator import VacationTotalsAggregator
from vacation_payroll.vacations.model import EmployeeVacationTotal


def _t(employee_id, name, amount):
    return EmployeeVacationTotal(employee_id=employee_id, employee_name=name, amount=amount)


def test_empty_input_is_the_no_data_state():
    summary = VacationTotalsAggregator().aggregate([])

    assert summary.total_amount == 0
    assert summary.employee_totals == ()


def test_totals_of_two_employees():
    summary = VacationTotalsAggregator().aggregate([_t(1, "John Doe", 3000), _t(2, "Jane Smith", 2000)])

    assert summary.total_amount == 5000
    assert len(summary.employee_totals) == 2
    assert summary.employee_totals[0].amount == 3000
    assert summary.employee_totals[1].employee_name == "Jane Smith"


def test_duplicate_employee_rejects_whole_aggregation():
    with pytest.raises(DuplicateEmployeeEntry):
        VacationTotalsAggregator().aggregate([_t(1, "John Doe", 3000), _t(1, "John Doe", 10)])


def test_negative_amount_is_rejected():
    with pytest.raises(ValidationError):
        VacationTotalsAggregator().aggregate([_t(1, "John Doe", Decimal("-0.01"))])


def test_only_the_grand_total_is_rounded():
    summary = VacationTotalsAggregator().aggregate(
        [_t(1, "A", Decimal("0.005")), _t(2, "B", Decimal("0.005")), _t(3, "C", Decimal("2.2251"))]
    )

    assert summary.total_amount == Decimal("2.24")
    assert [t.amount for t in summary.employee_totals] == [Decimal("0.005"), Decimal("0.005"), Decimal("2.2251")]


def test_reaggregation_is_idempotent():
    agg = VacationTotalsAggregator()
    first = agg.aggregate([_t(3, "C", Decimal("1.115")), _t(1, "A", Decimal("933.333")), _t(2, "B", 7)])

    assert agg.aggregate(first.employee_totals) == first


def test_input_order_is_kept():
    summary = VacationTotalsAggregator().aggregate([_t(3, "C", 1), _t(1, "A", 1), _t(2, "B", 1)])

    assert [t.employee_id for t in summary.employee_totals] == [3, 1, 2]


@pytest.mark.parametrize("amount", ["NaN", "Infinity", Decimal("sNaN")])
def test_non_finite_amount_is_rejected(amount):
    with pytest.raises(ValidationError):
        VacationTotalsAggregator().aggregate([_t(1, "A", amount)])


def test_warnings_survive_reaggregation():
    flagged = EmployeeVacationTotal(
        employee_id=2, employee_name="Jane Smith", amount=Decimal("0"), warnings=(ErrorCode.NO_WAGE_HISTORY,)
    )
    summary = VacationTotalsAggregator().aggregate([flagged])

    assert summary.employee_totals[0].warnings == (ErrorCode.NO_WAGE_HISTORY,)
    assert summary.to_dict()["employee_totals"][0]["warnings"] == ["NO_WAGE_HISTORY"]
