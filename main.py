# main.py
# Prints the dashboard totals and the monthly installment report.
import logging
import datetime
import sys

import pytz

from config import TIMEZONE
from db import init_db, SessionLocal, get_all
from models import Asset, Debt, RecurringIncome
from reports import all_installments, bucketize_by_month, dashboard_summary, windowed_chart_series
from debts import debt_progress
from calendar_helper import render_month_grid
from jalali import civil_to_jalali

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STATUS_LABELS = {
    "PAID": "پرداخت شده",
    "PENDING": "در انتظار",
    "OVERDUE": "معوق",
}


# Helpers
def get_session():
    return SessionLocal()


def format_currency(n):
    return f"{n:,}"


def get_local_today():
    tz = pytz.timezone(TIMEZONE)
    return datetime.datetime.now(tz).date()


def render_report(assets, debts, incomes, today):
    lines = []
    summary = dashboard_summary(assets, debts, incomes, today)
    lines.append(f"کل دارایی‌ها: {format_currency(summary.total_assets)}")
    lines.append(f"کل بدهی‌ها: {format_currency(summary.total_debts)}")
    lines.append(f"درآمد ماهانه: {format_currency(summary.total_monthly_income)}")
    lines.append(f"اقساط این ماه: {format_currency(summary.upcoming_payments)}")
    lines.append(f"مانده ماه: {format_currency(summary.monthly_balance)}")

    current = civil_to_jalali(today)
    lines.append("")
    lines.extend(render_month_grid(current.year, current.month))

    lines.append("")
    for debt in debts:
        paid_count, total_count, percent = debt_progress(debt)
        lines.append(f"{debt.name}: {paid_count}/{total_count} ({percent:.0f}%)")

    installments = all_installments(debts)
    lines.append("")
    for point in windowed_chart_series(installments, today):
        lines.append(
            f"{point.display_name}: "
            f"{STATUS_LABELS['PAID']} {format_currency(point.paid)} | "
            f"{STATUS_LABELS['PENDING']} {format_currency(point.pending)} | "
            f"{STATUS_LABELS['OVERDUE']} {format_currency(point.overdue)}"
        )

    for bucket in bucketize_by_month(installments, today):
        marker = " *" if bucket.is_current else ""
        lines.append("")
        lines.append(f"{bucket.display_name}{marker}: {format_currency(bucket.total)}")
        for name, amount, status in bucket.details:
            lines.append(f"  {name}: {format_currency(amount)} ({STATUS_LABELS[status]})")
    return "\n".join(lines)


def main():
    init_db()
    session = get_session()
    try:
        text = render_report(
            get_all(session, Asset),
            get_all(session, Debt),
            get_all(session, RecurringIncome),
            get_local_today(),
        )
    except Exception:
        logger.exception("Failed to build report")
        return 1
    finally:
        session.close()
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
