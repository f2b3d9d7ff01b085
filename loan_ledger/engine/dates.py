"""Calendar-day arithmetic used by every engine component.

All loan figures are computed at day granularity: the hours within a day
never count toward days active or days overdue.
"""

from datetime import date, datetime, timedelta

LOAN_TERM_DAYS = 30


def day_floor(moment: datetime | date) -> date:
    """Return the calendar day of ``moment``.

    Aware datetimes are floored in their own timezone.
    """
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def whole_days_between(later: datetime | date, earlier: datetime | date) -> int:
    """Return the number of calendar days from ``earlier`` to ``later``.

    Negative when ``later`` is actually the earlier day; callers clamp.
    """
    return (day_floor(later) - day_floor(earlier)).days


def calculate_due_date(start_date: datetime) -> datetime:
    """Return the due date of a loan started at ``start_date``."""
    return start_date + timedelta(days=LOAN_TERM_DAYS)


def resolve_as_of(as_of: datetime | None, reference: datetime | None = None) -> datetime:
    """Return the instant a computation runs against.

    Parameters
    ----------
    as_of : datetime | None
        Explicit instant. Returned unchanged when given.
    reference : datetime | None
        A loan timestamp; when it is timezone-aware the wall-clock
        fallback is taken in the same timezone so the two compare.

    Returns
    -------
    datetime
        The resolved instant.
    """
    if as_of is not None:
        return as_of
    if reference is not None and reference.tzinfo is not None:
        return datetime.now(reference.tzinfo)
    return datetime.now()
