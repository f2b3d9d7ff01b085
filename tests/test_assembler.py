"""Tests for per-loan calculation assembly."""

from decimal import Decimal

from loan_ledger.engine import assemble
from loan_ledger.models import LoanStatus


class TestAssemble:
    """Tests for assemble()."""

    def test_active_loan(self, loan, day) -> None:
        calc = assemble(loan, day(10))

        assert calc.status == LoanStatus.ACTIVE
        assert calc.days_active == 10
        assert calc.days_overdue == 0
        assert calc.base_interest == Decimal("500")
        assert calc.total_interest == Decimal("500")
        assert calc.total_payable == Decimal("10500")
        assert calc.total_paid == 0
        assert calc.remaining_balance == Decimal("10500")

    def test_overdue_loan(self, loan, day) -> None:
        calc = assemble(loan, day(40))

        assert calc.status == LoanStatus.OVERDUE
        assert calc.days_overdue == 10
        assert calc.daily_interest_rate.quantize(Decimal("0.01")) == Decimal("16.67")
        assert abs(calc.extra_interest - Decimal("166.7")) <= Decimal("0.04")
        assert abs(calc.total_payable - Decimal("10666.7")) <= Decimal("0.04")

    def test_overdue_loan_paid_in_full_is_closed(self, make_loan, day, make_payment) -> None:
        loan = make_loan(payments=[make_payment("loan-test-001", "10666.7", day(40))])
        calc = assemble(loan, day(40))

        assert calc.total_paid >= calc.total_payable
        assert calc.status == LoanStatus.CLOSED
        assert calc.remaining_balance == 0

    def test_due_today_with_partial_payment(self, make_loan, day, make_payment) -> None:
        loan = make_loan(payments=[make_payment("loan-test-001", "3000", day(15))])
        assert assemble(loan, day(30)).status == LoanStatus.DUE_TODAY

    def test_payments_are_summed(self, make_loan, day, make_payment) -> None:
        loan = make_loan(
            payments=[
                make_payment("loan-test-001", "1000", day(20), payment_id="p2"),
                make_payment("loan-test-001", "2500.50", day(5), payment_id="p1"),
            ]
        )
        calc = assemble(loan, day(25))

        assert calc.total_paid == Decimal("3500.50")
        assert calc.remaining_balance == Decimal("6999.50")
        assert calc.status == LoanStatus.PARTIALLY_PAID

    def test_overpayment_clamps_balance(self, make_loan, day, make_payment) -> None:
        loan = make_loan(payments=[make_payment("loan-test-001", "20000", day(3))])
        calc = assemble(loan, day(5))

        assert calc.remaining_balance == 0
        assert calc.status == LoanStatus.CLOSED

    def test_as_of_before_start_clamps_days_active(self, loan, day) -> None:
        calc = assemble(loan, day(-3))
        assert calc.days_active == 0
        assert calc.days_overdue == 0

    def test_closed_at_is_terminal(self, make_loan, day) -> None:
        loan = make_loan(closed_at=day(12))

        for offset in (12, 30, 45, 400):
            assert assemble(loan, day(offset)).status == LoanStatus.CLOSED

    def test_does_not_mutate_loan(self, make_loan, day, make_payment) -> None:
        loan = make_loan(payments=[make_payment("loan-test-001", "100", day(3))])
        before = (loan.due_date, loan.closed_at, list(loan.payments))

        assemble(loan, day(60))

        assert (loan.due_date, loan.closed_at, list(loan.payments)) == before
