"""Budget commands for managing monthly budgets and allocating them to date ranges."""

import sqlite3
import sys
from decimal import Decimal
from typing import NoReturn

from rich.console import Console
from rich.table import Table

from budgetspan.commands.admin import load_settings_or_exit
from budgetspan.config import get_currency_symbol, get_database_path
from budgetspan.dates import month_label, parse_date, parse_year_month
from budgetspan.domain.allocation import get_budget, get_budget_breakdown, validate_budget_amount
from budgetspan.domain.models import Money
from budgetspan.store.provider import SqliteBudgetProvider
from budgetspan.store.queries import (
    delete_monthly_budget,
    get_all_monthly_budgets,
    get_monthly_budget,
    set_monthly_budget,
)

console = Console()


def parse_money(amount_str: str) -> Money | None:
    """Parse money string to pence.

    Args:
        amount_str: String containing amount in pounds.

    Returns:
        Money amount in pence, or None if not a number.
    """
    try:
        return Money(round(float(amount_str) * 100))
    except (ValueError, OverflowError):
        return None


def format_money(amount: Money | Decimal, symbol: str) -> str:
    """Format an amount in pence for display (e.g., "£1,234.56")."""
    return f"{symbol}{amount / 100:,.2f}"


def _exit_missing_database() -> NoReturn:
    console.print("[red]Database not found. Run 'budgetspan init' first.[/red]", style="bold")
    sys.exit(1)


def set_command(month: str, amount: str) -> None:
    """Set the budget for a month."""
    settings = load_settings_or_exit()
    db_path = get_database_path(settings)
    symbol = get_currency_symbol(settings)

    try:
        year_month = parse_year_month(month)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    amount_pence = parse_money(amount)
    if amount_pence is None:
        console.print(f"[red]Invalid amount '{amount}'[/red]")
        sys.exit(1)

    is_valid, error = validate_budget_amount(amount_pence)
    if not is_valid:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    try:
        previous = get_monthly_budget(year_month, db_path)
        set_monthly_budget(year_month, amount_pence, db_path)
    except FileNotFoundError:
        _exit_missing_database()
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓ {month_label(year_month)} budget set to {format_money(amount_pence, symbol)}[/green]")
    if previous is not None and previous != amount_pence:
        console.print(f"[dim]Was {format_money(previous, symbol)}[/dim]")


def remove_command(month: str) -> None:
    """Remove the budget for a month."""
    db_path = get_database_path(load_settings_or_exit())

    try:
        year_month = parse_year_month(month)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    try:
        deleted = delete_monthly_budget(year_month, db_path)
    except FileNotFoundError:
        _exit_missing_database()
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if deleted:
        console.print(f"[green]✓ Removed budget for {month_label(year_month)}[/green]")
    else:
        console.print(f"[yellow]No budget set for {month_label(year_month)}[/yellow]")


def list_command() -> None:
    """List all monthly budgets."""
    settings = load_settings_or_exit()
    db_path = get_database_path(settings)
    symbol = get_currency_symbol(settings)

    try:
        budgets = get_all_monthly_budgets(db_path)
    except FileNotFoundError:
        _exit_missing_database()
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not budgets:
        console.print("[yellow]No budgets set[/yellow]")
        return

    table = Table(title=f"Monthly Budgets ({len(budgets)})")
    table.add_column("Key", style="dim")
    table.add_column("Month", style="cyan")
    table.add_column("Budget", justify="right", style="green")

    for budget in budgets:
        table.add_row(budget.year_month, month_label(budget.year_month), format_money(budget.amount, symbol))

    console.print(table)


def allocate_command(start: str, end: str, breakdown: bool = False) -> None:
    """Show the budget allocated to an inclusive date range."""
    settings = load_settings_or_exit()
    db_path = get_database_path(settings)
    symbol = get_currency_symbol(settings)

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)
    except ValueError as e:
        console.print(f"[red]Invalid date: {e}[/red]")
        sys.exit(1)

    provider = SqliteBudgetProvider(db_path)

    try:
        if breakdown:
            allocations = get_budget_breakdown(start_date, end_date, provider)
            total = Decimal(sum(allocation.allocated for allocation in allocations))
        else:
            allocations = []
            total = get_budget(start_date, end_date, provider)
    except FileNotFoundError:
        _exit_missing_database()
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if start_date > end_date:
        console.print("[yellow]Start date is after end date; nothing to allocate[/yellow]")

    if allocations:
        table = Table(title=f"Budget {start_date.isoformat()} to {end_date.isoformat()}")
        table.add_column("Month", style="cyan")
        table.add_column("Days", justify="right")
        table.add_column("Monthly", justify="right")
        table.add_column("Per day", justify="right", style="dim")
        table.add_column("Allocated", justify="right", style="green")

        for allocation in allocations:
            monthly = (
                format_money(allocation.monthly_amount, symbol)
                if allocation.monthly_amount is not None
                else "[dim]-[/dim]"
            )
            table.add_row(
                month_label(allocation.year_month),
                f"{allocation.covered_days}/{allocation.days_in_month}",
                monthly,
                format_money(allocation.per_day, symbol),
                format_money(allocation.allocated, symbol),
            )

        console.print(table)

    console.print(f"[bold]Total budget:[/bold] {format_money(total, symbol)}")
