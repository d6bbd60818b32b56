# debts.py
# Debt bookkeeping on top of the schedule generator: create/edit a debt,
# toggle installments, edit installment amounts.
import datetime
import logging

from jalali import to_civil_date
from logic import AmountBasis, generate_installments, schedule_total
from models import Debt, Installment, InstallmentStatus, RepaymentMethod

logger = logging.getLogger(__name__)


def save_debt(session, member_id, name, amount, start_date,
              repayment_method=RepaymentMethod.INSTALLMENT, installment_count=1,
              amount_basis=AmountBasis.TOTAL, description=None, debt=None):
    """
    Create a debt, or edit ``debt`` when given.

    amount: the debt total (TOTAL) or the fixed installment (PER_INSTALLMENT)
    installment_count: ignored for LUMP_SUM, which always has one installment

    On edit the existing installments (their statuses and any hand-edited
    amounts) are kept unless the total or the number of installments changed.
    """
    method = RepaymentMethod(repayment_method)
    basis = AmountBasis(amount_basis)
    count = 1 if method is RepaymentMethod.LUMP_SUM else installment_count

    # validate the terms before the session sees any change
    start = to_civil_date(start_date)
    schedule = generate_installments(basis, amount, count, start)
    total = schedule_total(basis, amount, count)

    regenerate = (
        debt is None
        or not debt.installments
        or debt.total_amount != total
        or len(debt.installments) != count
    )

    if debt is None:
        debt = Debt()
        session.add(debt)

    debt.member_id = member_id
    debt.name = name
    debt.repayment_method = method.value
    debt.amount_basis = basis.value
    debt.start_date = start
    debt.description = description

    if regenerate:
        debt.installments = [
            Installment(
                sequence_number=row["installment"],
                due_date=row["due_date"],
                amount=row["amount"],
                status=row["status"],
            )
            for row in schedule
        ]
        debt.total_amount = total
        logger.info("debt %r: generated %d installments totalling %s", name, count, total)
    else:
        logger.info("debt %r: terms unchanged, kept %d existing installments", name, count)

    session.commit()
    return debt


def _get_installment(session, installment_id):
    inst = session.get(Installment, installment_id)
    if inst is None:
        raise LookupError(f"installment {installment_id} not found")
    return inst


def toggle_installment_status(session, installment_id, now=None):
    inst = _get_installment(session, installment_id)
    if inst.is_paid:
        inst.status = InstallmentStatus.PENDING.value
        inst.paid_at = None
    else:
        inst.status = InstallmentStatus.PAID.value
        inst.paid_at = now or datetime.datetime.utcnow()
    session.commit()
    return inst


def update_installment_amount(session, installment_id, amount):
    """Edit one installment; the debt total follows the sum of its installments."""
    if amount < 0:
        raise ValueError(f"installment amount must not be negative: {amount}")
    inst = _get_installment(session, installment_id)
    inst.amount = amount
    debt = inst.debt
    debt.total_amount = sum(i.amount for i in debt.installments)
    session.commit()
    logger.info("installment %s set to %s, debt %r total now %s", installment_id, amount, debt.name, debt.total_amount)
    return inst


def mark_past_installments_paid(session, debt, today, now=None):
    """Mark everything due before ``today`` as paid (debts registered late)."""
    today = to_civil_date(today)
    now = now or datetime.datetime.utcnow()
    marked = 0
    for inst in debt.installments:
        if inst.due_date < today and not inst.is_paid:
            inst.status = InstallmentStatus.PAID.value
            inst.paid_at = now
            marked += 1
    session.commit()
    return marked


def debt_progress(debt):
    """(paid count, installment count, percent paid)"""
    total_count = len(debt.installments)
    paid_count = sum(1 for i in debt.installments if i.is_paid)
    percent = (paid_count / total_count) * 100 if total_count > 0 else 0
    return paid_count, total_count, percent
