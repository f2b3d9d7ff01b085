"""Persistence and output for loan ledgers."""

from loan_ledger.sinks.console import ConsoleSink
from loan_ledger.sinks.json_file import JsonLoanRepository

__all__ = ["ConsoleSink", "JsonLoanRepository"]
