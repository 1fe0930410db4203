from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # schema.sql holds DDL only, no ';' inside literals.
    for chunk in sql.split(";"):
        stmt = chunk.strip()
        if stmt:
            yield stmt


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping[str, Any], *, schema_path: str | Path = SCHEMA_PATH) -> None:
    conn_factory = DatabaseConnection(DBConfig.from_mapping(db_config))
    ensure_database_exists(conn_factory)

    sql = Path(schema_path).read_text(encoding="utf-8")
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", conn_factory.config.database)


def ensure_default_settings(db_config: Mapping[str, Any], defaults: Mapping[str, Any]) -> None:
    """Seed the single vacation_settings row unless an administrator already set one."""
    conn_factory = DatabaseConnection(DBConfig.from_mapping(db_config))
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute(
            """
            INSERT IGNORE INTO vacation_settings(
                id, calculation_period_months, vacation_coefficient, default_days_per_year
            )
            VALUES(1, %s, %s, %s)
            """,
            (
                int(defaults.get("calculation_period_months", 12)),
                str(defaults.get("vacation_coefficient", "1.0")),
                str(defaults.get("default_days_per_year", "24")),
            ),
        )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: Mapping[str, Any]) -> list[str]:
    conn_factory = DatabaseConnection(DBConfig.from_mapping(db_config))
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in cur.fetchall()]
    finally:
        conn.close()
