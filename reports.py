# reports.py
# Monthly report buckets and dashboard totals, keyed by Jalali month.
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import REPORT_MONTHS_AFTER, REPORT_MONTHS_BEFORE
from jalali import civil_to_jalali, to_civil_date
from logic import add_months_preserve_day

logger = logging.getLogger(__name__)

PAID = "PAID"
PENDING = "PENDING"
OVERDUE = "OVERDUE"


@dataclass
class MonthBucket:
    sort_key: str
    display_name: str
    total: int = 0
    paid: int = 0
    pending: int = 0
    overdue: int = 0
    # (debt name, amount, PAID/PENDING/OVERDUE) in input order
    details: List[Tuple[Optional[str], int, str]] = field(default_factory=list)
    is_current: bool = False


@dataclass
class ChartPoint:
    sort_key: str
    display_name: str
    paid: int = 0
    pending: int = 0
    overdue: int = 0


@dataclass
class DashboardSummary:
    total_assets: int
    total_debts: int
    total_monthly_income: int
    upcoming_payments: int
    monthly_balance: int


def report_window(now, before=REPORT_MONTHS_BEFORE, after=REPORT_MONTHS_AFTER):
    """
    Consecutive Jalali months around ``now``, as (sort_key, display_name)
    pairs: ``before`` months back through ``after`` months ahead.
    """
    window = []
    for i in range(-before, after + 1):
        jdate = civil_to_jalali(add_months_preserve_day(now, i))
        window.append((jdate.sort_key, jdate.month_label))
    return window


def classify(installment, today):
    if installment.status == PAID:
        return PAID
    if installment.due_date < today:
        return OVERDUE
    return PENDING


def _collect(installments, now):
    today = to_civil_date(now)
    current_key = civil_to_jalali(today).sort_key
    buckets = {}
    for inst in installments:
        jdate = civil_to_jalali(inst.due_date)
        bucket = buckets.get(jdate.sort_key)
        if bucket is None:
            bucket = buckets[jdate.sort_key] = MonthBucket(
                sort_key=jdate.sort_key,
                display_name=jdate.month_label,
                is_current=jdate.sort_key == current_key,
            )

        status = classify(inst, today)
        bucket.total += inst.amount
        if status == PAID:
            bucket.paid += inst.amount
        elif status == OVERDUE:
            bucket.overdue += inst.amount
        else:
            bucket.pending += inst.amount
        bucket.details.append((getattr(inst, "debt_name", None), inst.amount, status))
    logger.debug("bucketized installments into %d months (today %s)", len(buckets), today)
    return buckets


def bucketize_by_month(installments, now):
    """Every month holding at least one installment, oldest first."""
    buckets = _collect(installments, now)
    return [buckets[key] for key in sorted(buckets)]


def windowed_chart_series(installments, now):
    """Paid/pending/overdue sums for the fixed report window only."""
    buckets = _collect(installments, now)
    series = []
    for sort_key, display_name in report_window(now):
        bucket = buckets.get(sort_key)
        if bucket is None:
            series.append(ChartPoint(sort_key, display_name))
        else:
            series.append(ChartPoint(sort_key, display_name, bucket.paid, bucket.pending, bucket.overdue))
    return series


def all_installments(debts):
    return [inst for debt in debts for inst in debt.installments]


def dashboard_summary(assets, debts, incomes, now):
    """Headline totals; upcoming payments are the unpaid ones due this Jalali month."""
    current_key = civil_to_jalali(now).sort_key
    total_assets = sum(a.amount for a in assets)
    total_debts = sum(d.total_amount for d in debts)
    total_income = sum(i.amount for i in incomes)
    upcoming = sum(
        inst.amount
        for inst in all_installments(debts)
        if inst.status != PAID and civil_to_jalali(inst.due_date).sort_key == current_key
    )
    return DashboardSummary(
        total_assets=total_assets,
        total_debts=total_debts,
        total_monthly_income=total_income,
        upcoming_payments=upcoming,
        monthly_balance=total_income - upcoming,
    )
