import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "vacation_db"),
}

# Seed for the vacation_settings row and fallback when the row is missing.
VACATION_DEFAULTS = {
    "calculation_period_months": int(os.getenv("VACATION_CALCULATION_PERIOD_MONTHS", "12")),
    "vacation_coefficient": os.getenv("VACATION_COEFFICIENT", "1.0"),
    "default_days_per_year": os.getenv("VACATION_DAYS_PER_YEAR", "24"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
