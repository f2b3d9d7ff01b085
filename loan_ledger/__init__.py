"""Personal loan tracking: interest, status, dashboards and timelines."""

from loan_ledger.engine import (
    aggregate,
    assemble,
    format_currency,
    format_date,
    format_date_relative,
    query_loans,
    timeline,
)
from loan_ledger.models import (
    Borrower,
    DashboardSummary,
    Loan,
    LoanCalculation,
    LoanStatus,
    Payment,
    TimelineEvent,
)

__all__ = [
    "Borrower",
    "DashboardSummary",
    "Loan",
    "LoanCalculation",
    "LoanStatus",
    "Payment",
    "TimelineEvent",
    "aggregate",
    "assemble",
    "format_currency",
    "format_date",
    "format_date_relative",
    "query_loans",
    "timeline",
]
