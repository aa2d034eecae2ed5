"""Admin commands for backup and init."""

import shutil
import sqlite3
import sys
import tomllib
from datetime import datetime
from pathlib import Path
from typing import Any

from rich.console import Console

from budgetspan.config import (
    create_default_config,
    get_config_path,
    get_database_path,
    load_settings,
    save_config,
)
from budgetspan.store.schema import init_database

console = Console()


def load_settings_or_exit(config_path: Path | None = None) -> dict[str, Any]:
    """Load settings, exiting with a message if the config file is malformed."""
    try:
        return load_settings(config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config file is invalid: {e}[/red]", style="bold")
        console.print(f"[dim]Config: {config_path or get_config_path()}[/dim]")
        sys.exit(1)


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup database and configuration files."""
    db_path = get_database_path(load_settings_or_exit())
    config_path = get_config_path()

    if not db_path.exists():
        console.print("[red]Database not found. Run 'budgetspan init' first.[/red]", style="bold")
        sys.exit(1)

    if not config_path.exists():
        console.print("[red]Config not found. Run 'budgetspan init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = Path.home() / ".budgetspan" / "backups"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    db_backup = backup_dir / f"budgetspan_{timestamp}.db"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        shutil.copy2(config_path, config_backup)
        console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def init_command(force: bool = False) -> None:
    """Initialize budgetspan database and configuration."""
    config_path = get_config_path()
    settings = load_settings_or_exit(config_path)
    db_path = get_database_path(settings)

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'budgetspan init --force' to overwrite[/yellow]")
            sys.exit(1)

        if force and db_exists:
            db_path.unlink()

        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print(f"[cyan]Writing config file at {config_path}...[/cyan]")
        if config_exists:
            # Keep database_path and other overrides when re-initializing
            save_config(settings, config_path)
        else:
            create_default_config(config_path)
        console.print("[green]✓[/green] Config file written (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
