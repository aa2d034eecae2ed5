"""Tests for budgetspan.domain.allocation pure functions."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from budgetspan.domain.allocation import (
    MAX_BUDGET_AMOUNT,
    allocate_by_month,
    calculate_budget_for_period,
    find_budget,
    get_budget,
    get_budget_breakdown,
    prorate,
    validate_budget_amount,
    year_month_key,
)
from budgetspan.domain.models import CoverageEntry, MonthlyBudget, Money, YearMonth


class FakeBudgetProvider:
    """In-memory provider that records how often it is queried."""

    def __init__(self, *budgets: MonthlyBudget) -> None:
        self.budgets = list(budgets)
        self.calls = 0

    def get_all(self) -> Sequence[MonthlyBudget]:
        self.calls += 1
        return self.budgets


def budget(year_month: str, amount: int) -> MonthlyBudget:
    return MonthlyBudget(year_month=YearMonth(year_month), amount=Money(amount))


class TestYearMonthKey:
    """Tests for year_month_key."""

    def test_pads_month(self) -> None:
        """Should zero-pad single digit months."""
        assert year_month_key(2024, 1) == "202401"

    def test_two_digit_month(self) -> None:
        """Should keep two digit months as-is."""
        assert year_month_key(2023, 12) == "202312"

    def test_pads_year(self) -> None:
        """Should always produce a four digit year."""
        assert year_month_key(999, 7) == "099907"


class TestFindBudget:
    """Tests for find_budget."""

    def test_returns_none_when_missing(self) -> None:
        """Should return None for a month with no record."""
        assert find_budget([budget("202401", 31000)], YearMonth("202402")) is None

    def test_first_match_wins(self) -> None:
        """Should use the first record when keys are duplicated."""
        budgets = [budget("202401", 31000), budget("202401", 62000)]
        assert find_budget(budgets, YearMonth("202401")) == budgets[0]


class TestProrate:
    """Tests for prorate."""

    def test_whole_month(self) -> None:
        """Should return the full amount when divisible."""
        assert prorate(Money(31000), 31, 31) == Money(31000)

    def test_truncates_per_day_before_multiplying(self) -> None:
        """Should drop the remainder of the per-day rate."""
        assert prorate(Money(100), 3, 3) == Money(99)

    def test_truncates_partial(self) -> None:
        """Should truncate per-day amount for partial coverage too."""
        assert prorate(Money(100), 3, 1) == Money(33)

    def test_amount_smaller_than_days(self) -> None:
        """Should allocate nothing when the per-day rate truncates to zero."""
        assert prorate(Money(20), 31, 31) == Money(0)


class TestAllocateByMonth:
    """Tests for allocate_by_month."""

    def test_month_without_budget_allocates_zero(self) -> None:
        """Should include unbudgeted months with zero allocation."""
        coverage = [CoverageEntry(2024, 1, 10), CoverageEntry(2024, 2, 5)]
        allocations = allocate_by_month(coverage, [budget("202401", 31000)])

        assert [a.year_month for a in allocations] == ["202401", "202402"]
        assert allocations[0].allocated == Money(10000)
        assert allocations[0].per_day == Money(1000)
        assert allocations[1].monthly_amount is None
        assert allocations[1].allocated == Money(0)

    def test_records_days_in_month(self) -> None:
        """Should record the length of each month."""
        allocations = allocate_by_month([CoverageEntry(2024, 2, 2)], [budget("202402", 29000)])

        assert allocations[0].days_in_month == 29
        assert allocations[0].covered_days == 2
        assert allocations[0].allocated == Money(2000)


class TestCalculateBudgetForPeriod:
    """Tests for calculate_budget_for_period."""

    def test_empty_coverage(self) -> None:
        """Should return zero for no coverage."""
        assert calculate_budget_for_period([], [budget("202401", 31000)]) == Decimal(0)

    def test_returns_decimal(self) -> None:
        """Should return a Decimal total."""
        total = calculate_budget_for_period([CoverageEntry(2024, 1, 31)], [budget("202401", 31000)])

        assert isinstance(total, Decimal)
        assert total == Decimal(31000)


class TestGetBudget:
    """Tests for get_budget."""

    def test_invalid_period(self) -> None:
        """Should return zero when start is after end."""
        provider = FakeBudgetProvider(budget("202401", 31000))

        assert get_budget(date(2024, 1, 31), date(2024, 1, 1), provider) == 0

    def test_invalid_period_does_not_query_provider(self) -> None:
        """Should not touch the provider for an invalid range."""
        provider = FakeBudgetProvider(budget("202401", 31000))

        get_budget(date(2024, 1, 31), date(2024, 1, 1), provider)

        assert provider.calls == 0

    def test_january_no_budget(self) -> None:
        """Should return zero when no budgets exist."""
        provider = FakeBudgetProvider()

        assert get_budget(date(2024, 1, 1), date(2024, 1, 31), provider) == 0

    def test_long_range_without_budgets(self) -> None:
        """Should return zero regardless of range length."""
        provider = FakeBudgetProvider(budget("202001", 31000))

        assert get_budget(date(2024, 1, 1), date(2026, 6, 30), provider) == 0

    def test_in_month(self) -> None:
        """Should pro-rate a partial month."""
        provider = FakeBudgetProvider(budget("202401", 31000))

        assert get_budget(date(2024, 1, 1), date(2024, 1, 10), provider) == 10000

    def test_whole_month(self) -> None:
        """Should return the full budget for a whole month."""
        provider = FakeBudgetProvider(budget("202401", 31000))

        assert get_budget(date(2024, 1, 1), date(2024, 1, 31), provider) == 31000

    def test_cross_month(self) -> None:
        """Should add pro-rated amounts from each month."""
        provider = FakeBudgetProvider(budget("202401", 31000), budget("202402", 29000))

        assert get_budget(date(2024, 1, 30), date(2024, 2, 2), provider) == 4000

    def test_queries_provider_once(self) -> None:
        """Should read the provider once per call, however many months."""
        provider = FakeBudgetProvider(budget("202401", 31000), budget("202402", 29000))

        get_budget(date(2024, 1, 1), date(2024, 6, 30), provider)

        assert provider.calls == 1

    def test_idempotent(self) -> None:
        """Should return identical results for identical inputs."""
        provider = FakeBudgetProvider(budget("202401", 31000), budget("202402", 29000))
        start, end = date(2024, 1, 15), date(2024, 2, 20)

        assert get_budget(start, end, provider) == get_budget(start, end, provider)

    def test_key_matches_only_its_month(self) -> None:
        """Should not apply a January budget to December or February."""
        provider = FakeBudgetProvider(budget("202401", 31000))

        assert get_budget(date(2023, 12, 1), date(2023, 12, 31), provider) == 0
        assert get_budget(date(2024, 2, 1), date(2024, 2, 29), provider) == 0
        assert get_budget(date(2023, 12, 31), date(2024, 2, 1), provider) == 31000

    def test_truncation_remainder_is_lost(self) -> None:
        """Should not recover the remainder dropped by the per-day rate."""
        # February 2023 has 28 days: 100 // 28 = 3 per day
        provider = FakeBudgetProvider(budget("202302", 100))

        assert get_budget(date(2023, 2, 1), date(2023, 2, 28), provider) == 84

    def test_last_representable_month(self) -> None:
        """Should allocate December 9999 without raising."""
        provider = FakeBudgetProvider(budget("999912", 31000))

        assert get_budget(date(9999, 12, 1), date(9999, 12, 31), provider) == 31000

    def test_duplicate_records_use_first(self) -> None:
        """Should use the first record supplied for a month."""
        provider = FakeBudgetProvider(budget("202401", 31000), budget("202401", 62000))

        assert get_budget(date(2024, 1, 1), date(2024, 1, 31), provider) == 31000


class TestGetBudgetBreakdown:
    """Tests for get_budget_breakdown."""

    def test_invalid_period_is_empty(self) -> None:
        """Should return no rows and skip the provider for an invalid range."""
        provider = FakeBudgetProvider(budget("202401", 31000))

        assert get_budget_breakdown(date(2024, 2, 1), date(2024, 1, 1), provider) == []
        assert provider.calls == 0

    def test_rows_sum_to_total(self) -> None:
        """Should agree with get_budget."""
        provider = FakeBudgetProvider(budget("202401", 31000), budget("202402", 29000))
        start, end = date(2024, 1, 30), date(2024, 2, 2)

        rows = get_budget_breakdown(start, end, provider)

        assert [row.allocated for row in rows] == [Money(2000), Money(2000)]
        assert sum(row.allocated for row in rows) == get_budget(start, end, provider)


class TestValidateBudgetAmount:
    """Tests for validate_budget_amount."""

    def test_zero_is_valid(self) -> None:
        """Should allow a zero budget."""
        assert validate_budget_amount(Money(0)) == (True, None)

    def test_negative_is_invalid(self) -> None:
        """Should reject negative amounts."""
        is_valid, error = validate_budget_amount(Money(-1))

        assert is_valid is False
        assert error == "Amount must not be negative"

    def test_largest_storable_amount_is_valid(self) -> None:
        """Should allow the largest amount sqlite can store."""
        assert validate_budget_amount(MAX_BUDGET_AMOUNT) == (True, None)

    def test_too_large_is_invalid(self) -> None:
        """Should reject amounts beyond the sqlite INTEGER range."""
        is_valid, error = validate_budget_amount(Money(MAX_BUDGET_AMOUNT + 1))

        assert is_valid is False
        assert error == "Amount is too large"
