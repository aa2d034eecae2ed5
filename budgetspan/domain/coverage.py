"""Pure functions for splitting a date range into per-month coverage.

This module contains the functional core for calendar arithmetic:
- No I/O operations
- No side effects
- Pure data transformations

All ranges are inclusive of both the start and end day.
"""

import calendar
from datetime import date

from budgetspan.domain.models import CoverageEntry


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a calendar month.

    Args:
        year: Four-digit year.
        month: Month number (1-12).

    Returns:
        Number of days in the month (28-31).
    """
    return calendar.monthrange(year, month)[1]


def first_day_of_month(day: date) -> date:
    """Return the first day of the month containing ``day``."""
    return day.replace(day=1)


def last_day_of_month(day: date) -> date:
    """Return the last day of the month containing ``day``."""
    return day.replace(day=days_in_month(day.year, day.month))


def next_month(day: date) -> date:
    """Return the first day of the month after the one containing ``day``."""
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def decompose_range(start: date, end: date) -> list[CoverageEntry]:
    """Split an inclusive date range into per-month day counts.

    Walks month by month from the month containing ``start`` until the
    first day of the current month passes ``end``, clamping the range to
    each month in turn.

    Args:
        start: First day of the range. Must not be after ``end``.
        end: Last day of the range (included).

    Returns:
        One CoverageEntry per month touched by the range, oldest first.
    """
    coverage: list[CoverageEntry] = []

    current = first_day_of_month(start)
    while current <= end:
        actual_start = max(start, current)
        actual_end = min(end, last_day_of_month(current))

        if actual_start <= actual_end:
            covered_days = (actual_end - actual_start).days + 1
            coverage.append(CoverageEntry(year=current.year, month=current.month, covered_days=covered_days))

        # December of the last representable year has no following month
        if current.year == date.max.year and current.month == 12:
            break
        current = next_month(current)

    return coverage
