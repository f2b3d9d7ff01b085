"""Loan generator for personal lending portfolios."""

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from loan_ledger.engine import assemble, calculate_due_date
from loan_ledger.engine.dates import LOAN_TERM_DAYS
from loan_ledger.generators.base import BaseGenerator
from loan_ledger.models import Borrower, Loan, LoanStatus, Payment


class LoanGenerator(BaseGenerator):
    """Generate synthetic loans with payments, closures and extensions."""

    # Principal in thousands
    PRINCIPAL_RANGE = (5, 200)

    # Flat 30-day fee as a share of principal
    INTEREST_SHARE_RANGE = (0.02, 0.10)

    # How far back a loan may have started
    MAX_AGE_DAYS = 120

    PAYMENT_NOTES = ["Cash", "UPI transfer", "Bank transfer", None, None]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_IN",
        phone_rate: float = 0.7,
        extension_rate: float = 0.1,
        close_rate: float = 0.2,
    ) -> None:
        super().__init__(seed, locale)
        self.phone_rate = phone_rate
        self.extension_rate = extension_rate
        self.close_rate = close_rate

    def generate(self, as_of: datetime) -> Loan:
        """Generate a single loan as it would stand at ``as_of``.

        Parameters
        ----------
        as_of : datetime
            Instant the portfolio is generated for. Start dates and
            payment dates never fall after it.

        Returns
        -------
        Loan
            Generated loan with its payments.
        """
        return self._generate_one(as_of)

    def generate_batch(self, count: int, as_of: datetime) -> Iterator[Loan]:
        """Generate multiple loans.

        Parameters
        ----------
        count : int
            Number of loans to generate.
        as_of : datetime
            Instant the portfolio is generated for.

        Yields
        ------
        Loan
            Generated loans.
        """
        for _ in range(count):
            yield self._generate_one(as_of)

    def _generate_one(self, as_of: datetime) -> Loan:
        """Generate a single loan."""
        age_days = random.randint(0, self.MAX_AGE_DAYS)
        start_date = (as_of - timedelta(days=age_days)).replace(
            hour=random.randint(8, 20), minute=random.randint(0, 59), second=0, microsecond=0
        )
        if start_date > as_of:
            start_date -= timedelta(days=1)

        principal = Decimal(random.randint(*self.PRINCIPAL_RANGE) * 1000)
        share = random.uniform(*self.INTEREST_SHARE_RANGE)
        # Round the fee to the nearest hundred
        fixed_interest = Decimal(round(float(principal) * share / 100) * 100)

        due_date = calculate_due_date(start_date)
        if random.random() < self.extension_rate:
            due_date += timedelta(days=LOAN_TERM_DAYS)

        phone = self.fake.phone_number() if random.random() < self.phone_rate else None

        loan = Loan(
            loan_id=self.fake.uuid4(),
            borrower=Borrower(name=self.fake.name(), phone=phone),
            principal=principal,
            fixed_interest=fixed_interest,
            start_date=start_date,
            due_date=due_date,
            created_at=start_date,
            updated_at=start_date,
            notes=self.fake.sentence(nb_words=5) if random.random() < 0.3 else None,
        )

        loan.payments = self._generate_payments(loan, as_of)
        if loan.payments:
            loan.updated_at = max(p.created_at for p in loan.payments)

        if random.random() < self.close_rate:
            calc = assemble(loan, as_of)
            if calc.status != LoanStatus.CLOSED:
                loan.closed_at = as_of - timedelta(days=random.randint(0, min(age_days, 7)))
                loan.closed_at = max(loan.closed_at, start_date)
                loan.updated_at = max(loan.updated_at, loan.closed_at)

        return loan

    def _generate_payments(self, loan: Loan, as_of: datetime) -> list[Payment]:
        """Generate payment history for a loan."""
        days_elapsed = (as_of - loan.start_date).days
        if days_elapsed < 1:
            return []

        behavior = random.choices(["none", "partial", "full"], weights=[0.4, 0.35, 0.25])[0]
        if behavior == "none":
            return []

        payments: list[Payment] = []
        if behavior == "full":
            paid_on = loan.start_date + timedelta(days=random.randint(1, days_elapsed))
            amount = assemble(loan, paid_on).total_payable.quantize(Decimal("0.01"))
            payments.append(self._payment(loan, amount, paid_on))
            return payments

        owed = loan.principal + loan.fixed_interest
        num_payments = random.randint(1, 3)
        for _ in range(num_payments):
            paid_on = loan.start_date + timedelta(days=random.randint(1, days_elapsed))
            amount = Decimal(round(float(owed) * random.uniform(0.05, 0.3) / 100) * 100)
            if amount > 0:
                payments.append(self._payment(loan, amount, paid_on))

        return sorted(payments, key=lambda p: p.date)

    def _payment(self, loan: Loan, amount: Decimal, paid_on: datetime) -> Payment:
        return Payment(
            payment_id=self.fake.uuid4(),
            loan_id=loan.loan_id,
            amount=amount,
            date=paid_on,
            created_at=paid_on,
            notes=random.choice(self.PAYMENT_NOTES),
        )
