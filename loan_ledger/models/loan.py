"""Loan and payment records."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from loan_ledger.models.base import Borrower


@dataclass(frozen=True)
class Payment:
    """Money received against a loan. Immutable once recorded."""

    payment_id: str
    loan_id: str
    amount: Decimal
    date: datetime  # May be backdated or in the future
    created_at: datetime
    notes: str | None = None


@dataclass
class Loan:
    """Informal personal loan with a flat 30-day interest fee."""

    loan_id: str
    borrower: Borrower
    principal: Decimal  # Amount lent
    fixed_interest: Decimal  # Flat fee owed for the first 30 days
    start_date: datetime
    due_date: datetime  # Persisted; only extension or a start-date change moves it
    created_at: datetime
    updated_at: datetime
    notes: str | None = None
    payments: list[Payment] = field(default_factory=list)
    closed_at: datetime | None = None  # Set by an explicit close action only
