import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_payroll_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_JSON = False

MAX_WORK_SHIFT_HOURS = 10
MAX_PAID_ABSENCE_SHIFT_HOURS = 12
MAX_UNPAID_ABSENCE_SHIFT_HOURS = 24
MAX_DAILY_WORK_HOURS = 10
MAX_WEEKLY_WORK_HOURS = 35

REPORT_DELIMITER = ";"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
