"""Configuration file management for budgetspan."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from budgetspan.store.schema import get_db_path

DEFAULT_CURRENCY_SYMBOL = "£"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "budgetspan" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "currency_symbol": DEFAULT_CURRENCY_SYMBOL,
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, falling back to defaults when no file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary with defaults filled in.
    """
    settings: dict[str, Any] = {"currency_symbol": DEFAULT_CURRENCY_SYMBOL}
    try:
        settings.update(load_config(config_path))
    except FileNotFoundError:
        pass
    return settings


def get_currency_symbol(config: dict[str, Any]) -> str:
    """Currency symbol used when displaying amounts."""
    return str(config.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL))


def get_database_path(config: dict[str, Any]) -> Path:
    """Get the database path, honouring a ``database_path`` override.

    Args:
        config: Configuration dictionary.

    Returns:
        Path to the database file.
    """
    override = config.get("database_path")
    if override:
        return Path(override).expanduser()
    return get_db_path()
