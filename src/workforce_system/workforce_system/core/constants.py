"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Monthly wages are prorated over a fixed number of working days, not the
# calendar length of the month.
ASSUMED_WORKING_DAYS_PER_MONTH = 26

HALF_DAY_FACTOR = 0.5

DEFAULT_ROLE = "Worker"
DEFAULT_MONEY_DECIMALS = 2

ISO_DATE_FORMAT = "%Y-%m-%d"
