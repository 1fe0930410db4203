"""Example: call the service layer directly, without Flask."""

import importlib
from datetime import date

from vacation_payroll.container import build_container
from vacation_payroll.settings import get_settings_module


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, vacation_defaults=settings.VACATION_DEFAULTS)

    outcome = container.vacation_service.get_vacation_totals(date.today())
    if outcome.is_ready:
        print(outcome.value.to_dict())
    else:
        print("failed:", outcome.error.to_dict())


if __name__ == "__main__":
    main()
