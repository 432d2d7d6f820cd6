"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_VACATION_DAYS = 20
VACATION_PAYOUT_DAYS = 5
MIN_EMPLOYEE_AGE = 16
MAX_EMPLOYEE_AGE = 100
DEFAULT_COMPANY_NAME = "My Company"
