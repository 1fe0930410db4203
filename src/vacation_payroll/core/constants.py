"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Fixed year length for the accrual rate, regardless of leap years.
ACCRUAL_DAYS_BASIS = 365

CURRENCY_QUANTUM = Decimal("0.01")

DEFAULT_CALCULATION_PERIOD_MONTHS = 12
DEFAULT_VACATION_COEFFICIENT = Decimal("1.0")
DEFAULT_DAYS_PER_YEAR = Decimal("24")
DEFAULT_MIN_DAYS_PER_REQUEST = 1
DEFAULT_MAX_CONSECUTIVE_DAYS = 30

DEFAULT_SALARY_PAYMENT_DAY = 5
DEFAULT_REQUEST_LIST_LIMIT = 200
