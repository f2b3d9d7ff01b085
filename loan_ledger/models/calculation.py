"""Derived views over loans. Recomputed on every read, never persisted."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from loan_ledger.models.enums import LoanStatus, TimelineEventType
from loan_ledger.models.loan import Loan


@dataclass(frozen=True)
class LoanCalculation:
    """A loan together with its figures as of one instant."""

    loan: Loan
    status: LoanStatus
    days_active: int
    days_overdue: int
    base_interest: Decimal
    extra_interest: Decimal
    total_interest: Decimal
    total_payable: Decimal
    total_paid: Decimal
    remaining_balance: Decimal
    daily_interest_rate: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Portfolio-wide totals and counts."""

    total_money_lent: Decimal
    total_interest_expected: Decimal
    total_interest_earned: Decimal  # Interest portion collected on closed loans
    total_pending: Decimal  # Still to collect on open loans
    active_loans: int
    overdue_loans: int
    closed_loans: int
    total_loans: int


@dataclass(frozen=True)
class TimelineEvent:
    """One entry in a loan's history."""

    event_id: str
    event_type: TimelineEventType
    date: datetime
    title: str
    description: str
    amount: Decimal | None
    is_completed: bool
