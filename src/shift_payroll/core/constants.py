"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MAX_WORK_SHIFT_HOURS = 10
DEFAULT_MAX_PAID_ABSENCE_SHIFT_HOURS = 12
DEFAULT_MAX_UNPAID_ABSENCE_SHIFT_HOURS = 24
DEFAULT_MAX_DAILY_WORK_HOURS = 10
DEFAULT_MAX_WEEKLY_WORK_HOURS = 35

SECONDS_PER_HOUR = 3600
DEFAULT_REPORT_DELIMITER = ";"

# contracts.hourly_rate is DECIMAL(12, 4)
HOURLY_RATE_STEP = "0.0001"
MAX_HOURLY_RATE = "99999999.9999"
