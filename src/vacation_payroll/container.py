from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .policy.mysql_policy_repository import MySQLPolicySettingsRepository
from .policy.service import PolicyService
from .vacations.mysql_payment_repository import MySQLVacationPaymentRepository
from .vacations.mysql_request_repository import MySQLVacationRequestRepository
from .vacations.service import VacationService
from .wages.mysql_wage_repository import MySQLWageRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    wages_repo: MySQLWageRepository
    settings_repo: MySQLPolicySettingsRepository
    requests_repo: MySQLVacationRequestRepository
    payments_repo: MySQLVacationPaymentRepository

    policy_service: PolicyService
    vacation_service: VacationService


def build_container(*, db_config: Mapping[str, Any], vacation_defaults: Optional[Mapping[str, Any]] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    wages_repo = MySQLWageRepository(conn)
    settings_repo = MySQLPolicySettingsRepository(conn)
    requests_repo = MySQLVacationRequestRepository(conn)
    payments_repo = MySQLVacationPaymentRepository(conn)

    policy_service = PolicyService(settings_repo, defaults=vacation_defaults)
    vacation_service = VacationService(
        employees_repo,
        wages_repo,
        requests_repo,
        payments_repo,
        policy_service,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        wages_repo=wages_repo,
        settings_repo=settings_repo,
        requests_repo=requests_repo,
        payments_repo=payments_repo,
        policy_service=policy_service,
        vacation_service=vacation_service,
    )
