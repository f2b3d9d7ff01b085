"""Loan status classification."""

from datetime import datetime
from decimal import Decimal

from loan_ledger.engine.dates import day_floor
from loan_ledger.models.enums import LoanStatus


def classify_status(
    closed_at: datetime | None,
    total_paid: Decimal,
    total_payable: Decimal,
    due_date: datetime,
    as_of: datetime,
) -> LoanStatus:
    """Classify a loan from its totals and dates.

    Rules are checked in order and the first match wins:

    1. ``CLOSED`` when closed explicitly or paid in full.
    2. ``DUE_TODAY`` when the due date is today, even with partial payments.
    3. ``OVERDUE`` when past due with nothing paid.
    4. ``PARTIALLY_PAID`` when something but not everything is paid.
    5. ``ACTIVE`` otherwise.

    Parameters
    ----------
    closed_at : datetime | None
        Manual closure timestamp, if any.
    total_paid : Decimal
        Sum of recorded payments.
    total_payable : Decimal
        Amount owed as of ``as_of``.
    due_date : datetime
        Current due date.
    as_of : datetime
        Instant to classify at.

    Returns
    -------
    LoanStatus
        The loan's status.
    """
    if closed_at is not None or total_paid >= total_payable:
        return LoanStatus.CLOSED

    today = day_floor(as_of)
    due_day = day_floor(due_date)

    # Takes precedence over PARTIALLY_PAID; kept as the product behaves today
    if today == due_day:
        return LoanStatus.DUE_TODAY

    if total_paid > 0:
        return LoanStatus.PARTIALLY_PAID

    if today > due_day:
        return LoanStatus.OVERDUE

    return LoanStatus.ACTIVE
