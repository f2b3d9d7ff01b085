"""Portfolio-wide dashboard totals."""

from datetime import datetime
from decimal import MAX_PREC, Decimal, localcontext
from typing import Iterable

from loan_ledger.engine.assembler import assemble
from loan_ledger.engine.dates import resolve_as_of
from loan_ledger.models.calculation import DashboardSummary, LoanCalculation
from loan_ledger.models.enums import LoanStatus
from loan_ledger.models.loan import Loan

_ZERO = Decimal(0)

# A partially-paid loan counts as active and, once past due, as overdue too
_ACTIVE_STATUSES = frozenset(
    {LoanStatus.ACTIVE, LoanStatus.DUE_TODAY, LoanStatus.PARTIALLY_PAID}
)


def aggregate(loans: Iterable[Loan], as_of: datetime | None = None) -> DashboardSummary:
    """Calculate the dashboard summary for a collection of loans.

    Every loan is assembled against the same instant.

    Parameters
    ----------
    loans : Iterable[Loan]
        Loans in any order.
    as_of : datetime | None
        Instant to compute for. Defaults to now.

    Returns
    -------
    DashboardSummary
        Portfolio totals and counts.
    """
    loans = list(loans)
    if as_of is None:
        as_of = resolve_as_of(None, loans[0].start_date if loans else None)
    return aggregate_calculations(assemble(loan, as_of) for loan in loans)


def aggregate_calculations(calculations: Iterable[LoanCalculation]) -> DashboardSummary:
    """Fold already-assembled calculations into a dashboard summary.

    Sums are taken at unbounded precision, so additions never round and
    the totals do not depend on the order of ``calculations``.
    """
    # Assemble outside the unbounded context; fee / 30 would never terminate
    calculations = list(calculations)
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return _fold(calculations)


def _fold(calculations: Iterable[LoanCalculation]) -> DashboardSummary:
    total_money_lent = _ZERO
    total_interest_expected = _ZERO
    total_interest_earned = _ZERO
    total_pending = _ZERO
    active_loans = 0
    overdue_loans = 0
    closed_loans = 0
    total_loans = 0

    for calc in calculations:
        total_loans += 1
        total_money_lent += calc.loan.principal
        total_interest_expected += calc.total_interest

        if calc.status == LoanStatus.CLOSED:
            closed_loans += 1
            interest_paid = min(calc.total_paid - calc.loan.principal, calc.total_interest)
            total_interest_earned += max(_ZERO, interest_paid)
            continue

        total_pending += calc.remaining_balance

        if calc.status == LoanStatus.OVERDUE or (
            calc.status == LoanStatus.PARTIALLY_PAID and calc.days_overdue > 0
        ):
            overdue_loans += 1

        if calc.status in _ACTIVE_STATUSES:
            active_loans += 1

    return DashboardSummary(
        total_money_lent=total_money_lent,
        total_interest_expected=total_interest_expected,
        total_interest_earned=total_interest_earned,
        total_pending=total_pending,
        active_loans=active_loans,
        overdue_loans=overdue_loans,
        closed_loans=closed_loans,
        total_loans=total_loans,
    )
