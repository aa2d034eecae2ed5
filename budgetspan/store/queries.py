"""Database query functions."""

import sqlite3
from contextlib import closing
from pathlib import Path

from budgetspan.domain.models import MonthlyBudget, Money, YearMonth
from budgetspan.store.schema import get_db_path


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.

    Raises:
        FileNotFoundError: If the database has not been initialized.
    """
    if db_path is None:
        db_path = get_db_path()
    if not db_path.exists():
        raise FileNotFoundError(db_path)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def get_monthly_budget(year_month: YearMonth, db_path: Path | None = None) -> Money | None:
    """Get the budget amount for a month.

    Args:
        year_month: Month in YYYYMM format.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Budget amount in pence, or None if no budget set.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with closing(_connect(db_path)) as conn, conn:
        cursor = conn.cursor()
        cursor.execute("SELECT amount FROM monthly_budgets WHERE year_month = ?", (year_month,))
        row = cursor.fetchone()
        return Money(row[0]) if row else None


def set_monthly_budget(year_month: YearMonth, amount: Money, db_path: Path | None = None) -> None:
    """Set the budget amount for a month, replacing any existing amount.

    Args:
        year_month: Month in YYYYMM format.
        amount: Budget amount in pence.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with closing(_connect(db_path)) as conn, conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT OR REPLACE INTO monthly_budgets (year_month, amount) VALUES (?, ?)",
                (year_month, amount),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_monthly_budget(year_month: YearMonth, db_path: Path | None = None) -> bool:
    """Delete the budget for a month.

    Args:
        year_month: Month in YYYYMM format.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if a budget was deleted, False if none was set.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with closing(_connect(db_path)) as conn, conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM monthly_budgets WHERE year_month = ?", (year_month,))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def get_all_monthly_budgets(db_path: Path | None = None) -> list[MonthlyBudget]:
    """Get every monthly budget.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        List of MonthlyBudget records ordered by month.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with closing(_connect(db_path)) as conn, conn:
        cursor = conn.cursor()
        cursor.execute("SELECT year_month, amount FROM monthly_budgets ORDER BY year_month")
        return [MonthlyBudget(year_month=YearMonth(row[0]), amount=Money(row[1])) for row in cursor.fetchall()]
