"""Calendar helpers for monthly recurring expenses."""

import calendar
from datetime import date, datetime, timedelta
from typing import Tuple, Union


def as_date(value: Union[date, datetime]) -> date:
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def expected_occurrence(year: int, month: int, day_of_month: int) -> date:
    """
    Date a monthly expense is due in the given month.
    Days past the end of the month fall back to its last day (31 -> Feb 28/29).
    """
    safe_day = min(day_of_month, days_in_month(year, month))
    return date(year, month, safe_day)


def month_window(year: int, month: int, padding_days: int = 0) -> Tuple[date, date]:
    """First and last day of the month, widened by padding_days on both sides."""
    start = date(year, month, 1) - timedelta(days=padding_days)
    end = date(year, month, days_in_month(year, month)) + timedelta(days=padding_days)
    return start, end
