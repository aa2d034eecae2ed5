"""Domain models and types for budgetspan.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Budget arithmetic separated from storage and presentation
"""

from budgetspan.domain.models import CoverageEntry, MonthAllocation, MonthlyBudget, Money, YearMonth

__all__ = ["Money", "YearMonth", "MonthlyBudget", "CoverageEntry", "MonthAllocation"]
