"""Domain models for loan-ledger."""

from loan_ledger.models.base import Borrower
from loan_ledger.models.calculation import DashboardSummary, LoanCalculation, TimelineEvent
from loan_ledger.models.enums import LoanFilter, LoanSort, LoanStatus, TimelineEventType
from loan_ledger.models.loan import Loan, Payment

__all__ = [
    "Borrower",
    "DashboardSummary",
    "Loan",
    "LoanCalculation",
    "LoanFilter",
    "LoanSort",
    "LoanStatus",
    "Payment",
    "TimelineEvent",
    "TimelineEventType",
]
