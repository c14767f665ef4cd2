"""
Configuration management for wwt.

Uses the platform's config directory:
- Linux/BSD: $XDG_CONFIG_HOME/wwt (default ~/.config/wwt)
- macOS: ~/Library/Application Support/wwt
- Windows: %APPDATA%/wwt

The store lives at <config dir>/store.json unless overridden by
--store-path, WWT_STORE_PATH or [store] path in config.toml.
"""

from pathlib import Path
from typing import Any
import os
import sys

from wwt.errors import ConfigError

APP_NAME = "wwt"
STORE_PATH_ENV = "WWT_STORE_PATH"
LOG_LEVEL_ENV = "WWT_LOG_LEVEL"


def get_os_config_dir() -> Path:
    """Get the platform config root (not wwt-specific)."""
    if sys.platform.startswith("win"):
        if appdata := os.environ.get("APPDATA"):
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"

    if xdg := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg)
    return Path.home() / ".config"


def get_config_dir() -> Path:
    """Get the wwt config directory."""
    return get_os_config_dir() / APP_NAME


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_default_store_path() -> Path:
    """Get the default path to store.json."""
    return get_config_dir() / "store.json"


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return get_default_config()

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(e) from e


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "store": {
            "path": str(get_default_store_path()),
        },
        "logging": {
            "level": "WARNING",
        },
    }


def get_store_path(override: str | None = None, config: dict[str, Any] | None = None) -> Path:
    """
    Resolve the store file path.

    Order: explicit override, WWT_STORE_PATH, [store] path, default.
    """
    if override:
        return Path(override).expanduser()

    if env_path := os.environ.get(STORE_PATH_ENV):
        return Path(env_path).expanduser()

    if config is None:
        config = load_config()
    if configured := config.get("store", {}).get("path"):
        return Path(configured).expanduser()

    return get_default_store_path()


def get_log_level(config: dict[str, Any] | None = None) -> str:
    """Resolve the log level name (WWT_LOG_LEVEL, then [logging] level)."""
    if env_level := os.environ.get(LOG_LEVEL_ENV):
        return env_level.upper()

    if config is None:
        config = load_config()
    return str(config.get("logging", {}).get("level", "WARNING")).upper()
