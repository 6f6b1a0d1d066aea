import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Duration caps, in hours
MAX_WORK_SHIFT_HOURS = float(os.getenv("MAX_WORK_SHIFT_HOURS", "10"))
MAX_PAID_ABSENCE_SHIFT_HOURS = float(os.getenv("MAX_PAID_ABSENCE_SHIFT_HOURS", "12"))
MAX_UNPAID_ABSENCE_SHIFT_HOURS = float(os.getenv("MAX_UNPAID_ABSENCE_SHIFT_HOURS", "24"))
MAX_DAILY_WORK_HOURS = float(os.getenv("MAX_DAILY_WORK_HOURS", "10"))
MAX_WEEKLY_WORK_HOURS = float(os.getenv("MAX_WEEKLY_WORK_HOURS", "35"))

REPORT_DELIMITER = os.getenv("REPORT_DELIMITER", ";")

# If enabled, build_container applies schema.sql first (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
