from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..container import Container
from ..core.constants import DEFAULT_REQUEST_LIST_LIMIT, DEFAULT_SALARY_PAYMENT_DAY
from ..core.enums import ErrorCode, OutcomeState, RequestStatus
from ..core.exceptions import DomainError, ValidationError
from ..core.outcome import CalculationFailure, Outcome

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.EMPLOYEE_NOT_FOUND: 404,
    ErrorCode.INSUFFICIENT_ACCRUAL: 422,
    ErrorCode.DUPLICATE_EMPLOYEE_ENTRY: 409,
}


def _render(outcome: Outcome):
    if outcome.state == OutcomeState.READY:
        value = outcome.value
        body = value.to_dict() if hasattr(value, "to_dict") else value
        return jsonify({"state": outcome.state.value, "value": body}), 200

    error = outcome.error or CalculationFailure(ErrorCode.VALIDATION_ERROR, "Unknown error")
    return jsonify({"state": outcome.state.value, "error": error.to_dict()}), _STATUS_BY_CODE.get(error.code, 400)


def _parse_date_arg(value: Optional[str], field_name: str):
    if not value:
        return today_local()
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def _parse_int(value, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def register(app: Flask, container: Container) -> None:
    service = container.vacation_service

    def json_endpoint(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return _render(Outcome.failed(e))
            except Exception as e:
                logger.exception("Unhandled error in %s", request.path)
                message = f"System error: {e}" if app.config.get("DEBUG", False) else "System error"
                error = {"code": "SYSTEM_ERROR", "message": message}
                return jsonify({"state": OutcomeState.FAILED.value, "error": error}), 500

        return wrapper

    @app.route("/api/vacations/totals", methods=["GET"], endpoint="vacation_totals")
    @json_endpoint
    def vacation_totals():
        as_of = _parse_date_arg(request.args.get("as_of"), "as_of")
        return _render(service.get_vacation_totals(as_of))

    @app.route("/api/vacations/liability", methods=["GET"], endpoint="vacation_liability")
    @json_endpoint
    def vacation_liability():
        as_of = _parse_date_arg(request.args.get("as_of"), "as_of")
        return _render(service.get_accrual_liability(as_of))

    @app.route("/api/vacations/quote", methods=["GET"], endpoint="vacation_quote")
    @json_endpoint
    def vacation_quote():
        employee_id = _parse_int(request.args.get("employee_id"), "employee_id")
        start = _parse_date_arg(request.args.get("start"), "start")
        days = request.args.get("days") or "0"
        return _render(service.quote_vacation_pay(employee_id, start, days))

    @app.route("/api/vacations/balances/<int:employee_id>", methods=["GET"], endpoint="vacation_balance")
    @json_endpoint
    def vacation_balance(employee_id: int):
        as_of = _parse_date_arg(request.args.get("as_of"), "as_of")
        return _render(service.get_balance(employee_id, as_of))

    @app.route("/api/vacations/monthly-pay", methods=["GET"], endpoint="vacation_monthly_pay")
    @json_endpoint
    def vacation_monthly_pay():
        today = today_local()
        return _render(
            service.monthly_vacation_pay(
                employee_id=_parse_int(request.args.get("employee_id"), "employee_id"),
                year=_parse_int(request.args.get("year", today.year), "year"),
                month=_parse_int(request.args.get("month", today.month), "month"),
                salary_payment_day=_parse_int(
                    request.args.get("salary_day", DEFAULT_SALARY_PAYMENT_DAY), "salary_day"
                ),
            )
        )

    @app.route("/api/vacations/settings", methods=["GET", "PUT"], endpoint="vacation_settings")
    @json_endpoint
    def vacation_settings():
        if request.method == "PUT":
            changes = request.get_json(silent=True)
            if not isinstance(changes, dict):
                raise ValidationError("Expected a JSON object")
            settings = container.policy_service.update_settings(changes)
        else:
            settings = container.policy_service.get_settings()
        return _render(Outcome.ready(settings))

    @app.route("/api/vacations/requests", methods=["GET", "POST"], endpoint="vacation_requests")
    @json_endpoint
    def vacation_requests():
        if request.method == "GET":
            status_s = request.args.get("status")
            try:
                status = RequestStatus(status_s.upper()) if status_s else None
            except ValueError:
                raise ValidationError("Unknown request status")
            rows = service.list_requests(status=status, limit=DEFAULT_REQUEST_LIST_LIMIT)
            return _render(Outcome.ready([r.to_dict() for r in rows]))

        body = request.get_json(silent=True) or {}
        outcome = service.create_vacation_request(
            employee_id=_parse_int(body.get("employee_id"), "employee_id"),
            start_date=_parse_date_arg(body.get("start_date"), "start_date"),
            end_date=_parse_date_arg(body.get("end_date"), "end_date"),
            days_count=body.get("days_count", "0"),
        )
        response, status_code = _render(outcome)
        return response, (201 if outcome.is_ready else status_code)

    @app.route("/api/vacations/requests/<int:request_id>/approve", methods=["POST"], endpoint="vacation_request_approve")
    @json_endpoint
    def vacation_request_approve(request_id: int):
        return _render(service.approve_request(request_id))

    @app.route("/api/vacations/requests/<int:request_id>/reject", methods=["POST"], endpoint="vacation_request_reject")
    @json_endpoint
    def vacation_request_reject(request_id: int):
        return _render(service.reject_request(request_id))
