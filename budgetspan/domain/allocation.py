"""Pure functions for pro-rating monthly budgets over a date range.

This module contains the functional core for budget allocation:
- No I/O operations (budgets come from an injected provider)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in pence (Money type).
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from typing import Protocol

from budgetspan.domain.coverage import days_in_month, decompose_range
from budgetspan.domain.models import CoverageEntry, MonthAllocation, MonthlyBudget, Money, YearMonth

# Largest value a sqlite INTEGER column can hold
MAX_BUDGET_AMOUNT = Money(2**63 - 1)


class BudgetProvider(Protocol):
    """Anything that can supply the full set of monthly budget records."""

    def get_all(self) -> Sequence[MonthlyBudget]:
        """Return every monthly budget record."""
        ...


def year_month_key(year: int, month: int) -> YearMonth:
    """Build the YYYYMM key for a calendar month.

    Args:
        year: Four-digit year.
        month: Month number (1-12).

    Returns:
        Six character key, e.g. "202401".
    """
    return YearMonth(f"{year:04d}{month:02d}")


def find_budget(budgets: Sequence[MonthlyBudget], year_month: YearMonth) -> MonthlyBudget | None:
    """Find the budget record for a month.

    Args:
        budgets: Budget records in provider order.
        year_month: Month key to look up.

    Returns:
        First matching record, or None if the month has no budget.
    """
    return next((budget for budget in budgets if budget.year_month == year_month), None)


def prorate(amount: Money, month_days: int, covered_days: int) -> Money:
    """Pro-rate a monthly amount by covered days.

    The per-day rate is truncated to whole pence before multiplying, so any
    remainder of ``amount / month_days`` is dropped for every month.

    Args:
        amount: Budget for the whole month in pence (non-negative).
        month_days: Number of days in the month.
        covered_days: Days of the month inside the range.

    Returns:
        Allocated amount in pence.
    """
    per_day = amount // month_days
    return Money(per_day * covered_days)


def allocate_by_month(
    coverage: Sequence[CoverageEntry],
    budgets: Sequence[MonthlyBudget],
) -> list[MonthAllocation]:
    """Allocate each covered month's budget.

    Args:
        coverage: Per-month coverage, oldest first.
        budgets: Budget records in provider order.

    Returns:
        One MonthAllocation per coverage entry. Months without a budget
        record are allocated zero.
    """
    allocations: list[MonthAllocation] = []

    for entry in coverage:
        key = year_month_key(entry.year, entry.month)
        month_days = days_in_month(entry.year, entry.month)
        budget = find_budget(budgets, key)

        if budget is None:
            allocations.append(
                MonthAllocation(
                    year_month=key,
                    covered_days=entry.covered_days,
                    days_in_month=month_days,
                    monthly_amount=None,
                    per_day=Money(0),
                    allocated=Money(0),
                )
            )
            continue

        allocations.append(
            MonthAllocation(
                year_month=key,
                covered_days=entry.covered_days,
                days_in_month=month_days,
                monthly_amount=budget.amount,
                per_day=Money(budget.amount // month_days),
                allocated=prorate(budget.amount, month_days, entry.covered_days),
            )
        )

    return allocations


def calculate_budget_for_period(
    coverage: Sequence[CoverageEntry],
    budgets: Sequence[MonthlyBudget],
) -> Decimal:
    """Total the pro-rated budget for a set of covered months.

    Args:
        coverage: Per-month coverage, oldest first.
        budgets: Budget records in provider order.

    Returns:
        Total allocated amount in pence.
    """
    total = Decimal(0)
    for allocation in allocate_by_month(coverage, budgets):
        total += allocation.allocated
    return total


def get_budget(start: date, end: date, provider: BudgetProvider) -> Decimal:
    """Get the budget allocated to an inclusive date range.

    Args:
        start: First day of the range.
        end: Last day of the range (included).
        provider: Source of monthly budget records, read once per call.

    Returns:
        Allocated amount in pence. Zero when start is after end, in which
        case the provider is not queried.
    """
    if start > end:
        return Decimal(0)

    coverage = decompose_range(start, end)
    return calculate_budget_for_period(coverage, provider.get_all())


def get_budget_breakdown(start: date, end: date, provider: BudgetProvider) -> list[MonthAllocation]:
    """Get the per-month allocation for an inclusive date range.

    Args:
        start: First day of the range.
        end: Last day of the range (included).
        provider: Source of monthly budget records, read once per call.

    Returns:
        One MonthAllocation per month touched by the range, or an empty
        list when start is after end.
    """
    if start > end:
        return []

    coverage = decompose_range(start, end)
    return allocate_by_month(coverage, provider.get_all())


def validate_budget_amount(amount: Money) -> tuple[bool, str | None]:
    """Validate a monthly budget amount before storing it.

    Args:
        amount: Budget amount in pence.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if amount < 0:
        return False, "Amount must not be negative"

    if amount > MAX_BUDGET_AMOUNT:
        return False, "Amount is too large"

    return True, None
