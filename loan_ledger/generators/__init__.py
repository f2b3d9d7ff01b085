"""Synthetic loan portfolios for demos and tests."""

from loan_ledger.generators.loan import LoanGenerator

__all__ = ["LoanGenerator"]
