# logic.py
import enum
import logging

from jalali import JalaliDate, civil_to_jalali, month_length

logger = logging.getLogger(__name__)


class AmountBasis(enum.Enum):
    TOTAL = "TOTAL"
    PER_INSTALLMENT = "PER_INSTALLMENT"


class InvalidInstallmentCount(ValueError):
    pass


def add_months_preserve_day(date_obj, months):
    """
    date_obj: datetime.date (Gregorian), datetime or ISO string
    months: int, may be negative
    Return: datetime.date (Gregorian), shifted by whole Jalali months.
    """
    jstart = civil_to_jalali(date_obj)
    new_j = add_months_jalali_preserve_day(jstart, months)
    return new_j.to_gregorian()


def add_months_jalali_preserve_day(jdate, months):
    """
    jdate: JalaliDate
    months: int
    return: JalaliDate

    Keeps the day of month; when the target month is shorter the day is capped
    to its last day (31 Shahrivar + 1 month -> 30 Mehr).
    """
    carry, month_index = divmod(jdate.month - 1 + months, 12)
    new_y = jdate.year + carry
    new_m = month_index + 1
    new_d = min(jdate.day, month_length(new_y, new_m))
    return JalaliDate(new_y, new_m, new_d)


def schedule_total(amount_basis, amount, count):
    """Debt total implied by a set of repayment terms."""
    if AmountBasis(amount_basis) is AmountBasis.PER_INSTALLMENT:
        return amount * count
    return amount


def generate_installments(amount_basis, amount, count, start_date):
    """
    amount_basis: AmountBasis (or its value)
    amount: int, the debt total (TOTAL) or the fixed installment (PER_INSTALLMENT)
    count: int >= 1
    start_date: due date of the first installment
    returns: list of dicts, one per installment, all PENDING
    """
    basis = AmountBasis(amount_basis)
    if count < 1:
        raise InvalidInstallmentCount(f"invalid installment count: {count}")
    if amount < 0:
        raise ValueError(f"installment amount must not be negative: {amount}")

    if basis is AmountBasis.TOTAL:
        per_installment = amount // count
        # last installment absorbs the rounding remainder
        last = amount - per_installment * (count - 1)
    else:
        per_installment = last = amount

    schedule = []
    for i in range(count):
        schedule.append({
            "installment": i + 1,
            "due_date": add_months_preserve_day(start_date, i),
            "amount": last if i == count - 1 else per_installment,
            "status": "PENDING",
        })
    logger.debug("generated %d installments (%s, %s) from %s", count, basis.value, amount, start_date)
    return schedule

