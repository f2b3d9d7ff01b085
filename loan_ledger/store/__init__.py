"""Loan storage with payment ownership and closure rules."""

from loan_ledger.store.ledger import LoanLedgerStore

__all__ = ["LoanLedgerStore"]
