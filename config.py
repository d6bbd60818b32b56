# config.py
import os

DB_URL = os.getenv("FINANCE_DB_URL", "sqlite:///finance.db")

# local wall clock used for "today" and for aware instants
TIMEZONE = os.getenv("FINANCE_TIMEZONE", "Asia/Tehran")

# report chart window: months before / after the current Jalali month
REPORT_MONTHS_BEFORE = int(os.getenv("FINANCE_REPORT_MONTHS_BEFORE", "1"))
REPORT_MONTHS_AFTER = int(os.getenv("FINANCE_REPORT_MONTHS_AFTER", "4"))
