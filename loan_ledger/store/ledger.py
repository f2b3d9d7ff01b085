"""In-memory loan ledger, optionally persisted to a JSON repository."""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from loan_ledger.engine import aggregate, assemble, calculate_due_date, resolve_as_of, timeline
from loan_ledger.engine.dates import LOAN_TERM_DAYS
from loan_ledger.exceptions import (
    EntityNotFoundError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
    ValidationError,
)
from loan_ledger.logging import get_logger
from loan_ledger.models import (
    Borrower,
    DashboardSummary,
    Loan,
    LoanCalculation,
    Payment,
    TimelineEvent,
)
from loan_ledger.models.validation import (
    validate_borrower,
    validate_loan_amounts,
    validate_payment_amount,
)
from loan_ledger.sinks.json_file import JsonLoanRepository

logger = get_logger(__name__)

_UPDATABLE_FIELDS = frozenset(
    {"borrower", "principal", "fixed_interest", "start_date", "due_date", "notes", "closed_at"}
)


class LoanLedgerStore:
    """Loans keyed by id, each owning its payments.

    Every mutation builds a new ``Loan`` and swaps it in, so a reader
    holding a loan never sees it change underneath. When a repository is
    given, the whole ledger is saved after each mutation.

    Parameters
    ----------
    repository : JsonLoanRepository | None
        Backing file. Loans are loaded from it on construction.
    """

    def __init__(self, repository: JsonLoanRepository | None = None) -> None:
        self.repository = repository
        self.loans: dict[str, Loan] = {}
        if repository is not None:
            for loan in repository.load():
                self.loans[loan.loan_id] = loan

    # Reads

    def get_loan(self, loan_id: str) -> Loan:
        """Return a loan by id.

        Raises
        ------
        EntityNotFoundError
            If no loan has that id.
        """
        try:
            return self.loans[loan_id]
        except KeyError:
            raise EntityNotFoundError(f"Loan {loan_id} not found") from None

    def all_loans(self) -> list[Loan]:
        """Return every loan, newest first."""
        return sorted(self.loans.values(), key=lambda loan: loan.created_at, reverse=True)

    def calculations(self, as_of: datetime | None = None) -> list[LoanCalculation]:
        """Assemble every loan against one instant, newest first."""
        loans = self.all_loans()
        as_of = resolve_as_of(as_of, loans[0].start_date if loans else None)
        return [assemble(loan, as_of) for loan in loans]

    def dashboard(self, as_of: datetime | None = None) -> DashboardSummary:
        """Return the dashboard summary for the whole ledger."""
        return aggregate(self.loans.values(), as_of)

    def loan_timeline(self, loan_id: str, as_of: datetime | None = None) -> list[TimelineEvent]:
        """Return the timeline of one loan."""
        return timeline(self.get_loan(loan_id), as_of)

    # Loan mutations

    def create_loan(
        self,
        borrower: Borrower,
        principal: Decimal,
        fixed_interest: Decimal,
        start_date: datetime,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> Loan:
        """Create a loan due 30 days after ``start_date``.

        Raises
        ------
        ValidationError
            If the borrower has no name, the principal is not positive
            or the interest is negative.
        """
        validate_borrower(borrower)
        validate_loan_amounts(principal, fixed_interest)
        now = resolve_as_of(now, start_date)

        loan = Loan(
            loan_id=uuid.uuid4().hex,
            borrower=borrower,
            principal=principal,
            fixed_interest=fixed_interest,
            start_date=start_date,
            due_date=calculate_due_date(start_date),
            created_at=now,
            updated_at=now,
            notes=notes or None,
        )
        self.loans[loan.loan_id] = loan
        logger.info("Created loan for %s", borrower.name, extra={"loan_id": loan.loan_id})
        self._save()
        return loan

    def update_loan(self, loan_id: str, now: datetime | None = None, **changes: Any) -> Loan:
        """Apply a partial update to a loan.

        Changing ``start_date`` moves ``due_date`` to 30 days after it,
        unless ``due_date`` is given explicitly in the same update.

        Raises
        ------
        EntityNotFoundError
            If no loan has that id.
        ValidationError
            If an unknown field is given or a value is invalid.
        """
        loan = self.get_loan(loan_id)

        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update loan fields: {', '.join(sorted(unknown))}")

        if "borrower" in changes:
            validate_borrower(changes["borrower"])
        validate_loan_amounts(
            changes.get("principal", loan.principal),
            changes.get("fixed_interest", loan.fixed_interest),
        )

        start_date = changes.get("start_date")
        if start_date is not None and start_date != loan.start_date and "due_date" not in changes:
            changes["due_date"] = calculate_due_date(start_date)

        updated = replace(loan, updated_at=resolve_as_of(now, loan.start_date), **changes)
        self.loans[loan_id] = updated
        logger.debug(
            "Updated loan fields: %s", ", ".join(sorted(changes)), extra={"loan_id": loan_id}
        )
        self._save()
        return updated

    def delete_loan(self, loan_id: str) -> None:
        """Delete a loan together with its payments."""
        loan = self.get_loan(loan_id)
        del self.loans[loan_id]
        logger.info("Deleted loan", extra={"loan_id": loan_id, "count": len(loan.payments)})
        self._save()

    def extend_loan(self, loan_id: str, now: datetime | None = None) -> Loan:
        """Push a loan's due date back by another 30 days."""
        loan = self.get_loan(loan_id)
        if loan.closed_at is not None:
            raise InvalidEntityStateError(f"Loan {loan_id} is closed")
        return self.update_loan(
            loan_id,
            now=now,
            due_date=loan.due_date + timedelta(days=LOAN_TERM_DAYS),
        )

    def close_loan(self, loan_id: str, now: datetime | None = None) -> Loan:
        """Mark a loan as closed.

        Raises
        ------
        InvalidEntityStateError
            If the loan was already closed.
        """
        loan = self.get_loan(loan_id)
        if loan.closed_at is not None:
            raise InvalidEntityStateError(f"Loan {loan_id} is already closed")
        closed_at = resolve_as_of(now, loan.start_date)
        logger.info("Closing loan", extra={"loan_id": loan_id})
        return self.update_loan(loan_id, now=closed_at, closed_at=closed_at)

    # Payment mutations

    def add_payment(
        self,
        loan_id: str,
        amount: Decimal,
        date: datetime,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> Payment:
        """Record a payment against a loan.

        The date may be in the past or the future.

        Raises
        ------
        EntityNotFoundError
            If no loan has that id.
        ValidationError
            If the amount is not positive.
        """
        loan = self.get_loan(loan_id)
        validate_payment_amount(amount)

        now = resolve_as_of(now, loan.start_date)
        payment = Payment(
            payment_id=uuid.uuid4().hex,
            loan_id=loan_id,
            amount=amount,
            date=date,
            created_at=now,
            notes=notes or None,
        )
        self.loans[loan_id] = replace(loan, payments=[*loan.payments, payment], updated_at=now)
        logger.info(
            "Recorded payment of %s",
            amount,
            extra={"loan_id": loan_id, "payment_id": payment.payment_id},
        )
        self._save()
        return payment

    def delete_payment(self, loan_id: str, payment_id: str, now: datetime | None = None) -> None:
        """Remove a payment from a loan.

        Raises
        ------
        EntityNotFoundError
            If the loan does not exist.
        ReferentialIntegrityError
            If the payment is not one of this loan's payments.
        """
        loan = self.get_loan(loan_id)
        remaining = [p for p in loan.payments if p.payment_id != payment_id]
        if len(remaining) == len(loan.payments):
            raise ReferentialIntegrityError(f"Payment {payment_id} not found on loan {loan_id}")

        self.loans[loan_id] = replace(
            loan, payments=remaining, updated_at=resolve_as_of(now, loan.start_date)
        )
        logger.info("Deleted payment", extra={"loan_id": loan_id, "payment_id": payment_id})
        self._save()

    def _save(self) -> None:
        if self.repository is not None:
            self.repository.save(self.all_loans())
