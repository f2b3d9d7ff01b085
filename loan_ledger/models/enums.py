"""Enumeration types for loan-ledger entities."""

from enum import Enum


class LoanStatus(str, Enum):
    ACTIVE = "active"
    DUE_TODAY = "due-today"
    OVERDUE = "overdue"
    PARTIALLY_PAID = "partially-paid"
    CLOSED = "closed"


class TimelineEventType(str, Enum):
    LOAN_CREATED = "loan-created"
    DUE_DATE = "due-date"
    PAYMENT = "payment"
    OVERDUE = "overdue"
    CLOSED = "closed"


class LoanFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    OVERDUE = "overdue"
    PARTIAL = "partial"
    CLOSED = "closed"


class LoanSort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    AMOUNT_HIGH = "amount-high"
    AMOUNT_LOW = "amount-low"
    DUE_SOON = "due-soon"
