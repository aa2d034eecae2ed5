"""Date utilities for budgetspan.

Pure functions for parsing dates and month keys and formatting them.
"""

from datetime import date, datetime

from budgetspan.domain.models import YearMonth


def parse_date(text: str) -> date:
    """Parse a YYYY-MM-DD string into a date.

    Raises:
        ValueError: If the text is not a valid date.
    """
    return datetime.strptime(text.strip(), "%Y-%m-%d").date()


def parse_year_month(text: str) -> YearMonth:
    """Parse a month given as YYYY-MM or YYYYMM into a YYYYMM key.

    Args:
        text: Month text from the user.

    Returns:
        Normalised six character month key.

    Raises:
        ValueError: If the text is not a valid month.
    """
    value = text.strip()
    fmt, expected_length = ("%Y-%m", 7) if "-" in value else ("%Y%m", 6)
    if len(value) != expected_length:
        raise ValueError(f"Invalid month '{text}', expected YYYY-MM or YYYYMM")

    dt = datetime.strptime(value, fmt)
    return YearMonth(f"{dt.year:04d}{dt.month:02d}")


def split_year_month(year_month: YearMonth) -> tuple[int, int]:
    """Split a YYYYMM key into (year, month)."""
    return int(year_month[:4]), int(year_month[4:])


def month_label(year_month: YearMonth) -> str:
    """Human-readable month (e.g., "January 2024")."""
    year, month = split_year_month(year_month)
    return date(year, month, 1).strftime("%B %Y")
