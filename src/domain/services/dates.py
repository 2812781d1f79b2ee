"""Calendar helpers for monthly simulations."""

import calendar
from datetime import date


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the month length.

    Args:
        start: Date to shift.
        months: Number of months, may be negative.

    Returns:
        date: Shifted date (Jan 31 + 1 month is Feb 28/29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def same_month(left: date, right: date) -> bool:
    return left.year == right.year and left.month == right.month


__all__ = ["add_months", "same_month"]
