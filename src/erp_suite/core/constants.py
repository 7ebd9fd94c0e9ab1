"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Nominal working month used for the overtime hourly rate.
NOMINAL_WORKING_DAYS = 22
NOMINAL_HOURS_PER_DAY = 8
OVERTIME_MULTIPLIER = 1.5

DEFAULT_SESSION_DAYS = 7
DASHBOARD_TREND_MONTHS = 6

MIN_NAME_LENGTH = 2
MIN_ADMIN_PASSWORD_LENGTH = 8
EARLIEST_EXPENSE_DATE = "1900-01-01"
