"""Tests for the sample loan generator."""

from datetime import datetime

from loan_ledger.engine import aggregate, assemble
from loan_ledger.generators import LoanGenerator

AS_OF = datetime(2024, 6, 1, 12, 0, 0)


class TestLoanGenerator:
    """Tests for LoanGenerator."""

    def test_generate(self, seed: int) -> None:
        loan = LoanGenerator(seed=seed).generate(AS_OF)

        assert loan.principal > 0
        assert loan.fixed_interest >= 0
        assert loan.borrower.name
        assert loan.start_date <= AS_OF
        assert (loan.due_date - loan.start_date).days in (30, 60)

    def test_batch_is_reproducible(self, seed: int) -> None:
        first = list(LoanGenerator(seed=seed).generate_batch(20, AS_OF))
        second = list(LoanGenerator(seed=seed).generate_batch(20, AS_OF))

        assert [l.principal for l in first] == [l.principal for l in second]
        assert [l.borrower for l in first] == [l.borrower for l in second]

    def test_payments_belong_to_loan(self, seed: int) -> None:
        for loan in LoanGenerator(seed=seed).generate_batch(50, AS_OF):
            for payment in loan.payments:
                assert payment.loan_id == loan.loan_id
                assert payment.amount > 0
                assert loan.start_date < payment.date <= AS_OF
            if loan.closed_at is not None:
                assert loan.start_date <= loan.closed_at <= AS_OF

    def test_portfolio_mixes_statuses(self, seed: int) -> None:
        loans = list(LoanGenerator(seed=seed).generate_batch(100, AS_OF))

        statuses = {assemble(loan, AS_OF).status for loan in loans}
        summary = aggregate(loans, AS_OF)

        assert len(statuses) >= 3
        assert summary.total_loans == 100
