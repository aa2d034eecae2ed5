"""Sqlite-backed budget provider."""

from pathlib import Path

from budgetspan.domain.models import MonthlyBudget
from budgetspan.store.queries import get_all_monthly_budgets


class SqliteBudgetProvider:
    """Supplies monthly budgets from the budgetspan database.

    Every call to ``get_all`` reads the table afresh; nothing is cached.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path

    def get_all(self) -> list[MonthlyBudget]:
        """Return every monthly budget record."""
        return get_all_monthly_budgets(self.db_path)
