"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

import pytest

from loan_ledger.models import Borrower, Loan, Payment

DAY_0 = datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def day() -> Callable[..., datetime]:
    """Instant ``n`` days after the reference start date, 1 Jan 2024 10:00."""

    def _day(n: int, hour: int = 10) -> datetime:
        return (DAY_0 + timedelta(days=n)).replace(hour=hour)

    return _day


@pytest.fixture
def make_payment() -> Callable[..., Payment]:
    """Factory for a payment recorded on the day it was made."""

    def _make(loan_id: str, amount: str, on: datetime, payment_id: str = "pay-001") -> Payment:
        return Payment(
            payment_id=payment_id,
            loan_id=loan_id,
            amount=Decimal(amount),
            date=on,
            created_at=on,
        )

    return _make


@pytest.fixture
def sample_loan_id() -> str:
    """Sample loan ID."""
    return "loan-test-001"


@pytest.fixture
def make_loan(sample_loan_id: str) -> Callable[..., Loan]:
    """Factory for a 10000 loan with a 500 fee started on day 0."""

    def _make(
        loan_id: str = sample_loan_id,
        principal: str = "10000",
        fixed_interest: str = "500",
        start: datetime = DAY_0,
        payments: list[Payment] | None = None,
        closed_at: datetime | None = None,
        name: str = "Ravi Kumar",
        phone: str | None = "+91 98765 43210",
        notes: str | None = None,
    ) -> Loan:
        return Loan(
            loan_id=loan_id,
            borrower=Borrower(name=name, phone=phone),
            principal=Decimal(principal),
            fixed_interest=Decimal(fixed_interest),
            start_date=start,
            due_date=start + timedelta(days=30),
            created_at=start,
            updated_at=start,
            notes=notes,
            payments=payments or [],
            closed_at=closed_at,
        )

    return _make


@pytest.fixture
def loan(make_loan: Callable[..., Loan]) -> Loan:
    """Scenario loan: 10000 principal, 500 fee, no payments."""
    return make_loan()
