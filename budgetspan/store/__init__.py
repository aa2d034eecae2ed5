"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from budgetspan.store.provider import SqliteBudgetProvider
from budgetspan.store.queries import (
    delete_monthly_budget,
    get_all_monthly_budgets,
    get_monthly_budget,
    set_monthly_budget,
)
from budgetspan.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "delete_monthly_budget",
    "get_all_monthly_budgets",
    "get_monthly_budget",
    "set_monthly_budget",
    # Provider
    "SqliteBudgetProvider",
]
