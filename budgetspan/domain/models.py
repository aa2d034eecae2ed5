"""Domain type definitions for budgetspan.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in pence (minor units)
- YearMonth: Month key in YYYYMM format
"""

from dataclasses import dataclass
from typing import NewType

# Money amounts are stored as pence (minor units) to avoid floating point errors
Money = NewType("Money", int)

# YearMonth is always 4-digit year + 2-digit month (e.g., "202401")
YearMonth = NewType("YearMonth", str)


@dataclass(frozen=True)
class MonthlyBudget:
    """Immutable budget record for a whole calendar month."""

    year_month: YearMonth
    amount: Money


@dataclass(frozen=True)
class CoverageEntry:
    """Number of days of a calendar month that fall inside a query range."""

    year: int
    month: int
    covered_days: int


@dataclass(frozen=True)
class MonthAllocation:
    """Immutable pro-rated allocation for a single month."""

    year_month: YearMonth
    covered_days: int
    days_in_month: int
    monthly_amount: Money | None  # None when no budget is set for the month
    per_day: Money
    allocated: Money
