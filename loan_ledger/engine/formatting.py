"""Display formatting for amounts and dates.

Rendering is fixed to Indian rupees with Indian digit grouping
(``₹1,00,000``); there is no locale switch.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from loan_ledger.engine.dates import day_floor, resolve_as_of, whole_days_between

CURRENCY_SYMBOL = "₹"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_CENTS = Decimal("0.01")


def format_currency(amount: Decimal | int | float) -> str:
    """Format an amount as rupees with 0-2 fraction digits.

    Examples
    --------
    >>> format_currency(Decimal("100000"))
    '₹1,00,000'
    >>> format_currency(Decimal("16.6666"))
    '₹16.67'
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0")

    text = f"{sign}{CURRENCY_SYMBOL}{_group_indian(integer_part)}"
    if fraction:
        text += f".{fraction}"
    return text


def _group_indian(digits: str) -> str:
    """Insert separators: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_date(moment: datetime | date) -> str:
    """Format a date as ``dd Mon yyyy``."""
    day = day_floor(moment)
    return f"{day.day:02d} {_MONTHS[day.month - 1]} {day.year}"


def format_date_relative(moment: datetime | date, now: datetime | None = None) -> str:
    """Format a date relative to ``now``.

    Parameters
    ----------
    moment : datetime | date
        Date to describe.
    now : datetime | None
        Reference instant. Defaults to the current time.

    Returns
    -------
    str
        "Today", "Tomorrow", "Yesterday", "In N days" or "N days ago"
        within a week either side, otherwise the absolute date.
    """
    reference = moment if isinstance(moment, datetime) else None
    now = resolve_as_of(now, reference)
    diff_days = whole_days_between(moment, now)

    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Tomorrow"
    if diff_days == -1:
        return "Yesterday"
    if 0 < diff_days <= 7:
        return f"In {diff_days} days"
    if -7 <= diff_days < 0:
        return f"{abs(diff_days)} days ago"

    return format_date(moment)
