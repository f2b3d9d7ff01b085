"""Simple fixed-fee interest with a daily penalty after the due date.

INTEREST LOGIC:
- Within the term: total payable = principal + fixed interest
- After the due date: extra interest = days overdue * (fixed interest / 30)
- Final payable = principal + fixed interest + extra interest
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from loan_ledger.engine.dates import whole_days_between

INTEREST_PERIOD_DAYS = Decimal(30)

_ZERO = Decimal(0)


@dataclass(frozen=True)
class InterestBreakdown:
    """Interest figures for one loan as of one instant."""

    daily_interest_rate: Decimal
    days_overdue: int
    base_interest: Decimal
    extra_interest: Decimal
    total_interest: Decimal
    total_payable: Decimal


def calculate_interest(
    principal: Decimal,
    fixed_interest: Decimal,
    due_date: datetime,
    as_of: datetime,
) -> InterestBreakdown:
    """Compute interest and total payable for a loan.

    Parameters
    ----------
    principal : Decimal
        Amount lent.
    fixed_interest : Decimal
        Flat fee for the 30-day term.
    due_date : datetime
        Current due date of the loan.
    as_of : datetime
        Instant the figures are computed for.

    Returns
    -------
    InterestBreakdown
        Unrounded interest figures.
    """
    daily_interest_rate = fixed_interest / INTEREST_PERIOD_DAYS
    days_overdue = max(0, whole_days_between(as_of, due_date))

    extra_interest = days_overdue * daily_interest_rate if days_overdue > 0 else _ZERO
    total_interest = fixed_interest + extra_interest

    return InterestBreakdown(
        daily_interest_rate=daily_interest_rate,
        days_overdue=days_overdue,
        base_interest=fixed_interest,
        extra_interest=extra_interest,
        total_interest=total_interest,
        total_payable=principal + total_interest,
    )
