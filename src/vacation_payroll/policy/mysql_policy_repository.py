from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import PolicySettings
from .repository import PolicySettingsRepository

# Single-row table; the row is always id=1.
SETTINGS_ROW_ID = 1


class MySQLPolicySettingsRepository(PolicySettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[PolicySettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT calculation_period_months, vacation_coefficient, default_days_per_year,
                       accrual_cap_enabled, min_days_per_request, max_consecutive_days
                FROM vacation_settings
                WHERE id=%s
                """,
                (SETTINGS_ROW_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PolicySettings.from_mapping(r)

    def upsert(self, settings: PolicySettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_settings(
                    id, calculation_period_months, vacation_coefficient, default_days_per_year,
                    accrual_cap_enabled, min_days_per_request, max_consecutive_days
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    calculation_period_months=VALUES(calculation_period_months),
                    vacation_coefficient=VALUES(vacation_coefficient),
                    default_days_per_year=VALUES(default_days_per_year),
                    accrual_cap_enabled=VALUES(accrual_cap_enabled),
                    min_days_per_request=VALUES(min_days_per_request),
                    max_consecutive_days=VALUES(max_consecutive_days)
                """,
                (
                    SETTINGS_ROW_ID,
                    int(settings.calculation_period_months),
                    settings.vacation_coefficient,
                    settings.default_days_per_year,
                    1 if settings.accrual_cap_enabled else 0,
                    int(settings.min_days_per_request),
                    int(settings.max_consecutive_days),
                ),
            )
