"""Helper functions shared by the analytics calculators."""

from datetime import date, datetime
from dateutil.relativedelta import relativedelta
from typing import Optional, Sequence, Union

DateLike = Union[str, date, datetime]


def to_date(value: DateLike) -> date:
    """Normalize an ISO string, date or datetime to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def resolve_today(today: Optional[DateLike] = None) -> date:
    """Evaluation date: the given one, or the current date."""
    if today is None:
        return date.today()
    return to_date(today)


def calc_due_miles(
    last_miles: Optional[float], interval: float, start_miles: float = 0
) -> float:
    """
    Calculate next due mileage.

    - With history: last_miles + interval
    - Without history: start_miles + interval (never serviced)
    """
    if last_miles is not None:
        return last_miles + interval
    return start_miles + interval


def whole_years_between(start: DateLike, end: DateLike) -> int:
    """Complete years from start to end, truncated and never negative."""
    return max(0, relativedelta(to_date(end), to_date(start)).years)


def whole_months_between(start: DateLike, end: DateLike) -> int:
    """Complete months from start to end, truncated and never negative."""
    delta = relativedelta(to_date(end), to_date(start))
    return max(0, delta.years * 12 + delta.months)


def month_key(value: DateLike) -> str:
    """Calendar bucket key, e.g. '2025-03'."""
    return to_date(value).strftime("%Y-%m")


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0 instead of raising or producing inf/nan."""
    if not denominator:
        return 0.0
    return numerator / denominator


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    return safe_divide(sum(values), len(values))
