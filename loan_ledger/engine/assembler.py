"""Per-loan calculation: dates, interest, payments and status in one view."""

from datetime import datetime
from decimal import Decimal

from loan_ledger.engine.dates import resolve_as_of, whole_days_between
from loan_ledger.engine.interest import calculate_interest
from loan_ledger.engine.status import classify_status
from loan_ledger.models.calculation import LoanCalculation
from loan_ledger.models.loan import Loan

_ZERO = Decimal(0)


def assemble(loan: Loan, as_of: datetime | None = None) -> LoanCalculation:
    """Calculate all financial details for a loan.

    The loan is not modified. Every call builds a fresh
    ``LoanCalculation``, so results can be discarded and recomputed
    freely, but must not be reused across a change of calendar day.

    Parameters
    ----------
    loan : Loan
        Loan with its payments.
    as_of : datetime | None
        Instant to compute for. Defaults to now.

    Returns
    -------
    LoanCalculation
        Status, interest and balance figures.
    """
    as_of = resolve_as_of(as_of, loan.start_date)

    days_active = max(0, whole_days_between(as_of, loan.start_date))
    interest = calculate_interest(
        loan.principal,
        loan.fixed_interest,
        loan.due_date,
        as_of,
    )

    total_paid = sum((payment.amount for payment in loan.payments), _ZERO)
    # Overpayment is absorbed, not carried as credit
    remaining_balance = max(_ZERO, interest.total_payable - total_paid)

    status = classify_status(
        loan.closed_at,
        total_paid,
        interest.total_payable,
        loan.due_date,
        as_of,
    )

    return LoanCalculation(
        loan=loan,
        status=status,
        days_active=days_active,
        days_overdue=interest.days_overdue,
        base_interest=interest.base_interest,
        extra_interest=interest.extra_interest,
        total_interest=interest.total_interest,
        total_payable=interest.total_payable,
        total_paid=total_paid,
        remaining_balance=remaining_balance,
        daily_interest_rate=interest.daily_interest_rate,
    )
