"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_MONTHLY_BASE_SALARY = Decimal("8500")
DEFAULT_SALARY_DIVISOR = Decimal("26")
DEFAULT_CURRENCY = "RMB"

FULL_DAY_CREDIT = Decimal("1")
HALF_DAY_CREDIT = Decimal("0.5")

WORKING_DAYS_PLACES = Decimal("0.1")
MONEY_PLACES = Decimal("0.01")
