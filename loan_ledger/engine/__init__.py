"""Loan accounting engine.

Pure functions of a loan (or loans) and an ``as_of`` instant. Nothing
here persists, mutates its inputs or reads the clock more than once
per call.
"""

from loan_ledger.engine.assembler import assemble
from loan_ledger.engine.dashboard import aggregate, aggregate_calculations
from loan_ledger.engine.dates import (
    LOAN_TERM_DAYS,
    calculate_due_date,
    day_floor,
    resolve_as_of,
    whole_days_between,
)
from loan_ledger.engine.formatting import format_currency, format_date, format_date_relative
from loan_ledger.engine.interest import INTEREST_PERIOD_DAYS, InterestBreakdown, calculate_interest
from loan_ledger.engine.listing import query_loans, sort_calculations
from loan_ledger.engine.status import classify_status
from loan_ledger.engine.timeline import timeline

__all__ = [
    "INTEREST_PERIOD_DAYS",
    "LOAN_TERM_DAYS",
    "InterestBreakdown",
    "aggregate",
    "aggregate_calculations",
    "assemble",
    "calculate_due_date",
    "calculate_interest",
    "classify_status",
    "day_floor",
    "format_currency",
    "format_date",
    "format_date_relative",
    "query_loans",
    "resolve_as_of",
    "sort_calculations",
    "timeline",
    "whole_days_between",
]
