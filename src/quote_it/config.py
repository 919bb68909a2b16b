"""
Configuration management for quote-it.

Uses XDG base directories:
- Config: ~/.config/quote-it/config.toml
- Data: ~/.local/share/quote-it/ (the quote store)
"""

from pathlib import Path
from typing import Any
import os

from pydantic import BaseModel, Field, ValidationError

from quote_it.errors import QuoteItError

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_DATA_HOME = Path.home() / ".local" / "share"

STORE_FILENAME = "quotes.json"


class StoreSettings(BaseModel):
    """[store] section."""

    path: str | None = Field(default=None, description="Store file; None means <data dir>/quotes.json")


class LoggingSettings(BaseModel):
    """[logging] section."""

    level: str = Field(default="WARNING", description="Logging level name")


class DisplaySettings(BaseModel):
    """[display] section."""

    date_format: str = Field(default="%m-%d-%Y", description="strftime format for quote dates")


class ConfigFile(BaseModel):
    """Schema for config.toml. Missing sections and keys fall back to defaults."""

    store: StoreSettings = Field(default_factory=StoreSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/quote-it)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "quote-it"


def get_data_dir() -> Path:
    """Get the data directory (QUOTE_IT_HOME or XDG_DATA_HOME/quote-it)."""
    if env_home := os.environ.get("QUOTE_IT_HOME"):
        return Path(env_home)
    base = Path(os.environ.get("XDG_DATA_HOME", DEFAULT_DATA_HOME))
    return base / "quote-it"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_store_path(config: dict[str, Any] | None = None) -> Path:
    """
    Get the path to the quote store.

    An explicit `[store] path` in config.toml wins over the data directory.
    """
    config = config if config is not None else load_config()
    if custom := config.get("store", {}).get("path"):
        return Path(custom).expanduser()
    return get_data_dir() / STORE_FILENAME


def ensure_dirs() -> None:
    """Ensure all required directories exist."""
    for directory in (get_config_dir(), get_data_dir()):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise QuoteItError(f"Could not create {directory}: {e}") from e


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist.
    Raises QuoteItError if the file can't be parsed or has the wrong shape.
    """
    config_path = get_config_path()

    # Lazy import tomli
    import tomli

    try:
        with open(config_path, "rb") as f:
            user_config = tomli.load(f)
    except FileNotFoundError:
        return get_default_config()
    except (OSError, tomli.TOMLDecodeError) as e:
        raise QuoteItError(f"Could not read config {config_path}: {e}") from e

    try:
        return ConfigFile.model_validate(user_config).model_dump()
    except ValidationError as e:
        raise QuoteItError(f"Invalid config {config_path}: {e}") from e


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return ConfigFile().model_dump()
