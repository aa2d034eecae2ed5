"""CLI entry point for budgetspan."""

import typer

from budgetspan.commands.admin import backup_command, init_command
from budgetspan.commands.budget import allocate_command, list_command, remove_command, set_command

app = typer.Typer(
    name="budgetspan",
    help="Pro-rate monthly budgets across any date range",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Pro-rate monthly budgets across any date range."""
    pass


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.budgetspan/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize budgetspan database and configuration."""
    init_command(force)


@app.command(name="set")
def set_budget(
    month: str = typer.Argument(..., help="Month to budget for (YYYY-MM or YYYYMM)"),
    amount: str = typer.Argument(..., help="Budget for the whole month (in £)"),
) -> None:
    """Set the budget for a month."""
    set_command(month, amount)


@app.command(name="remove")
def remove(
    month: str = typer.Argument(..., help="Month to clear (YYYY-MM or YYYYMM)"),
) -> None:
    """Remove the budget for a month."""
    remove_command(month)


@app.command(name="list")
def list_budgets() -> None:
    """List your monthly budgets."""
    list_command()


@app.command()
def allocate(
    start: str = typer.Argument(..., help="First day of the range (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="Last day of the range, included (YYYY-MM-DD)"),
    breakdown: bool = typer.Option(False, "--breakdown", "-b", help="Show the allocation for each month"),
) -> None:
    """Show how much budget applies to a date range."""
    allocate_command(start, end, breakdown)


if __name__ == "__main__":
    app()
