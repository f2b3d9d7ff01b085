"""Loan history as an ordered list of timeline events."""

from datetime import datetime

from loan_ledger.engine.assembler import assemble
from loan_ledger.engine.dates import day_floor, resolve_as_of
from loan_ledger.engine.formatting import format_currency
from loan_ledger.models.calculation import TimelineEvent
from loan_ledger.models.enums import LoanStatus, TimelineEventType
from loan_ledger.models.loan import Loan


def timeline(loan: Loan, as_of: datetime | None = None) -> list[TimelineEvent]:
    """Generate timeline events for a loan's history.

    Events come back most recent first. Events on the same instant keep
    the order they were produced in: created, due date, payments in
    recorded order, overdue, closed.

    Parameters
    ----------
    loan : Loan
        Loan with its payments.
    as_of : datetime | None
        Instant to compute for. Defaults to now.

    Returns
    -------
    list[TimelineEvent]
        Events sorted by date, descending.
    """
    as_of = resolve_as_of(as_of, loan.start_date)
    calc = assemble(loan, as_of)
    events: list[TimelineEvent] = []

    events.append(
        TimelineEvent(
            event_id=f"{loan.loan_id}-created",
            event_type=TimelineEventType.LOAN_CREATED,
            date=loan.start_date,
            title="Loan Given",
            description=f"Lent {format_currency(loan.principal)} to {loan.borrower.name}",
            amount=loan.principal,
            is_completed=True,
        )
    )

    amount_due = loan.principal + loan.fixed_interest
    is_due_passed = day_floor(loan.due_date) <= day_floor(as_of)
    events.append(
        TimelineEvent(
            event_id=f"{loan.loan_id}-due",
            event_type=TimelineEventType.DUE_DATE,
            date=loan.due_date,
            title="Due Date Passed" if is_due_passed else "Due Date",
            description=f"Payment of {format_currency(amount_due)} due",
            amount=amount_due,
            is_completed=is_due_passed,
        )
    )

    for payment in loan.payments:
        events.append(
            TimelineEvent(
                event_id=payment.payment_id,
                event_type=TimelineEventType.PAYMENT,
                date=payment.date,
                title="Payment Received",
                description=payment.notes or f"Received {format_currency(payment.amount)}",
                amount=payment.amount,
                is_completed=True,
            )
        )

    # Dated at the due date, when the penalty started accruing
    if calc.days_overdue > 0 and calc.status != LoanStatus.CLOSED:
        events.append(
            TimelineEvent(
                event_id=f"{loan.loan_id}-overdue",
                event_type=TimelineEventType.OVERDUE,
                date=loan.due_date,
                title="Loan Overdue",
                description=(
                    f"{calc.days_overdue} days overdue. "
                    f"Extra interest: {format_currency(calc.extra_interest)}"
                ),
                amount=calc.extra_interest,
                is_completed=True,
            )
        )

    if loan.closed_at is not None or calc.status == LoanStatus.CLOSED:
        events.append(
            TimelineEvent(
                event_id=f"{loan.loan_id}-closed",
                event_type=TimelineEventType.CLOSED,
                date=loan.closed_at or as_of,
                title="Loan Closed",
                description=f"Total collected: {format_currency(calc.total_paid)}",
                amount=calc.total_paid,
                is_completed=True,
            )
        )

    # sorted() is stable under reverse=True, so ties keep production order
    return sorted(events, key=lambda event: event.date, reverse=True)
