"""Tests for loan timelines."""

from decimal import Decimal

from loan_ledger.engine import timeline
from loan_ledger.models import TimelineEventType


def _types(events) -> list[TimelineEventType]:
    return [event.event_type for event in events]


class TestTimeline:
    """Tests for timeline()."""

    def test_new_loan(self, loan, day) -> None:
        events = timeline(loan, day(10))

        assert _types(events) == [TimelineEventType.DUE_DATE, TimelineEventType.LOAN_CREATED]

        due, created = events
        assert created.amount == Decimal("10000")
        assert created.is_completed
        assert due.amount == Decimal("10500")
        assert due.title == "Due Date"
        assert not due.is_completed

    def test_due_date_completed_on_due_day(self, loan, day) -> None:
        due = next(e for e in timeline(loan, day(30)) if e.event_type == TimelineEventType.DUE_DATE)
        assert due.is_completed
        assert due.title == "Due Date Passed"

    def test_overdue_event_dated_at_due_date(self, loan, day) -> None:
        events = timeline(loan, day(40))

        assert _types(events) == [
            TimelineEventType.DUE_DATE,
            TimelineEventType.OVERDUE,
            TimelineEventType.LOAN_CREATED,
        ]
        overdue = events[1]
        assert overdue.date == loan.due_date
        assert abs(overdue.amount - Decimal("166.67")) < Decimal("0.01")
        assert "10 days overdue" in overdue.description

    def test_paid_in_full_is_closed_at_as_of(self, make_loan, day, make_payment) -> None:
        loan = make_loan(payments=[make_payment("loan-test-001", "10500", day(20))])

        events = timeline(loan, day(25))

        assert _types(events) == [
            TimelineEventType.DUE_DATE,
            TimelineEventType.CLOSED,
            TimelineEventType.PAYMENT,
            TimelineEventType.LOAN_CREATED,
        ]
        closed = events[1]
        assert closed.date == day(25)
        assert closed.amount == Decimal("10500")

    def test_closed_event_uses_closed_at(self, make_loan, day) -> None:
        loan = make_loan(closed_at=day(45))

        events = timeline(loan, day(60))

        assert events[0].event_type == TimelineEventType.CLOSED
        assert events[0].date == day(45)
        assert TimelineEventType.OVERDUE not in _types(events)

    def test_payments_most_recent_first(self, make_loan, day, make_payment) -> None:
        loan = make_loan(
            payments=[
                make_payment("loan-test-001", "1000", day(3), payment_id="early"),
                make_payment("loan-test-001", "2000", day(12), payment_id="late"),
            ]
        )

        payments = [e for e in timeline(loan, day(15)) if e.event_type == TimelineEventType.PAYMENT]

        assert [e.event_id for e in payments] == ["late", "early"]
        assert all(e.is_completed for e in payments)

    def test_same_instant_keeps_recorded_order(self, make_loan, day, make_payment) -> None:
        loan = make_loan(
            payments=[
                make_payment("loan-test-001", "1000", day(5), payment_id="first"),
                make_payment("loan-test-001", "1000", day(5), payment_id="second"),
            ]
        )

        payments = [e for e in timeline(loan, day(10)) if e.event_type == TimelineEventType.PAYMENT]

        assert [e.event_id for e in payments] == ["first", "second"]

    def test_sorted_descending(self, make_loan, day, make_payment) -> None:
        loan = make_loan(payments=[make_payment("loan-test-001", "500", day(33))])
        dates = [e.date for e in timeline(loan, day(50))]
        assert dates == sorted(dates, reverse=True)
