"""Search, filter and sort for loan lists."""

from datetime import datetime
from typing import Callable, Iterable

from loan_ledger.engine.assembler import assemble
from loan_ledger.engine.dates import resolve_as_of
from loan_ledger.models.calculation import LoanCalculation
from loan_ledger.models.enums import LoanFilter, LoanSort, LoanStatus
from loan_ledger.models.loan import Loan

# Loans needing attention float to the top regardless of the chosen sort
STATUS_PRIORITY: dict[LoanStatus, int] = {
    LoanStatus.DUE_TODAY: 0,
    LoanStatus.OVERDUE: 1,
    LoanStatus.ACTIVE: 2,
    LoanStatus.PARTIALLY_PAID: 3,
    LoanStatus.CLOSED: 4,
}

_FILTER_STATUSES: dict[LoanFilter, frozenset[LoanStatus]] = {
    LoanFilter.ACTIVE: frozenset({LoanStatus.ACTIVE, LoanStatus.DUE_TODAY}),
    LoanFilter.OVERDUE: frozenset({LoanStatus.OVERDUE}),
    LoanFilter.PARTIAL: frozenset({LoanStatus.PARTIALLY_PAID}),
    LoanFilter.CLOSED: frozenset({LoanStatus.CLOSED}),
}

_SORT_KEYS: dict[LoanSort, tuple[Callable[[LoanCalculation], object], bool]] = {
    LoanSort.NEWEST: (lambda calc: calc.loan.created_at, True),
    LoanSort.OLDEST: (lambda calc: calc.loan.created_at, False),
    LoanSort.AMOUNT_HIGH: (lambda calc: calc.loan.principal, True),
    LoanSort.AMOUNT_LOW: (lambda calc: calc.loan.principal, False),
    LoanSort.DUE_SOON: (lambda calc: calc.loan.due_date, False),
}


def matches_search(calc: LoanCalculation, query: str) -> bool:
    """Return True if the borrower name, phone or notes contain ``query``.

    Name and notes match case-insensitively; phone matches as typed.
    """
    if not query:
        return True

    loan = calc.loan
    needle = query.lower()
    if needle in loan.borrower.name.lower():
        return True
    if loan.borrower.phone and query in loan.borrower.phone:
        return True
    return bool(loan.notes) and needle in loan.notes.lower()


def matches_filter(calc: LoanCalculation, loan_filter: LoanFilter) -> bool:
    """Return True if the calculation's status passes ``loan_filter``."""
    if loan_filter == LoanFilter.ALL:
        return True
    return calc.status in _FILTER_STATUSES[loan_filter]


def sort_calculations(
    calculations: Iterable[LoanCalculation],
    sort_by: LoanSort = LoanSort.NEWEST,
) -> list[LoanCalculation]:
    """Sort by the chosen key, then group by status priority.

    The priority pass is stable, so within one status the chosen order
    is kept.
    """
    key, reverse = _SORT_KEYS[sort_by]
    ordered = sorted(calculations, key=key, reverse=reverse)
    return sorted(ordered, key=lambda calc: STATUS_PRIORITY[calc.status])


def query_loans(
    loans: Iterable[Loan],
    query: str = "",
    loan_filter: LoanFilter = LoanFilter.ALL,
    sort_by: LoanSort = LoanSort.NEWEST,
    as_of: datetime | None = None,
) -> list[LoanCalculation]:
    """Assemble, search, filter and sort loans for a list view.

    Parameters
    ----------
    loans : Iterable[Loan]
        Loans to list.
    query : str
        Free-text search over borrower name, phone and notes.
    loan_filter : LoanFilter
        Status filter.
    sort_by : LoanSort
        Sort order applied before status grouping.
    as_of : datetime | None
        Instant to compute for. Defaults to now.

    Returns
    -------
    list[LoanCalculation]
        Matching calculations in display order.
    """
    loans = list(loans)
    if as_of is None:
        as_of = resolve_as_of(None, loans[0].start_date if loans else None)

    calculations = (assemble(loan, as_of) for loan in loans)
    matching = [
        calc
        for calc in calculations
        if matches_search(calc, query) and matches_filter(calc, loan_filter)
    ]
    return sort_calculations(matching, sort_by)
