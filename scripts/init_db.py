from __future__ import annotations

import importlib

from dotenv import load_dotenv

from vacation_payroll.database.bootstrap import apply_schema, ensure_default_settings, list_tables
from vacation_payroll.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    ensure_default_settings(db_config, getattr(settings, "VACATION_DEFAULTS", {}))
    tables = list_tables(db_config)
    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
