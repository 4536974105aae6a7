"""
Configuration loader.

Loads configuration from:
1. Default values (built-in)
2. TOML config file (kline.toml or ~/.config/kline/config.toml)
3. Environment variables, optionally seeded from a .env file

Priority: env vars > config file > defaults
"""

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import IndicatorConfig

logger = logging.getLogger(__name__)

# Config file search paths (in priority order)
CONFIG_PATHS = [
    Path("kline.toml"),                                 # Current directory
    Path(".kline.toml"),                                # Hidden in current directory
    Path.home() / ".config" / "kline" / "config.toml",  # User config
]

# Environment variable prefix
ENV_PREFIX = "KLINE_"

# Environment variable suffix -> (section, field)
ENV_OVERRIDES = {
    "SMA_PERIOD": ("moving_averages", "sma_period"),
    "EMA_PERIOD": ("moving_averages", "ema_period"),
    "MACD_FAST": ("macd", "fast_period"),
    "MACD_SLOW": ("macd", "slow_period"),
    "MACD_SIGNAL": ("macd", "signal_period"),
    "BOLLINGER_PERIOD": ("bollinger", "period"),
    "BOLLINGER_STD_DEV": ("bollinger", "num_std_dev"),
    "RSI_PERIOD": ("rsi", "period"),
    "LOOKBACK": ("pipeline", "lookback"),
    "SERIES_ORDER": ("pipeline", "series_order"),
    "FAIL_FAST": ("pipeline", "fail_fast"),
}


class ConfigError(Exception):
    """Configuration error with helpful message."""

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path)) from e

    logger.info(f"Loaded config from: {path}")
    return data


def _find_config_file() -> Path | None:
    """Find the first existing config file."""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def _load_env_overrides() -> dict[str, dict[str, str]]:
    """Collect KLINE_* environment variables into config sections."""
    overrides: dict[str, dict[str, str]] = {}
    for suffix, (section, field) in ENV_OVERRIDES.items():
        value = os.environ.get(f"{ENV_PREFIX}{suffix}")
        if value is not None:
            overrides.setdefault(section, {})[field] = value.strip()
    return overrides


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Path | str | None = None,
    env_file: Path | str | None = None,
) -> IndicatorConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Explicit path to config file (optional)
        env_file: .env file to read before environment overrides (optional).
            Variables already set in the environment win.

    Returns:
        Validated IndicatorConfig

    Raises:
        ConfigError: If configuration is invalid
    """
    config_data: dict[str, Any] = {}

    # Load from config file
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
        config_data = _load_toml_file(path)
    else:
        found_path = _find_config_file()
        if found_path:
            config_data = _load_toml_file(found_path)

    if env_file:
        load_dotenv(env_file, override=False)

    env_overrides = _load_env_overrides()
    if env_overrides:
        config_data = _deep_merge(config_data, env_overrides)
        count = sum(len(v) for v in env_overrides.values())
        logger.debug(f"Applied {count} override(s) from environment")

    # Validate and create config
    try:
        config = IndicatorConfig(**config_data)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", []))
            msg = first_error.get("msg", "Validation error")
            raise ConfigError(f"Invalid configuration: {msg}", field=field) from e
        raise ConfigError(f"Invalid configuration: {e}") from e

    return config


@lru_cache
def get_config() -> IndicatorConfig:
    """
    Get singleton configuration instance.

    Uses LRU cache to ensure config is loaded only once.
    """
    return load_config()


def reload_config(config_path: Path | str | None = None) -> IndicatorConfig:
    """
    Force reload configuration.

    Clears the cache and reloads from file/environment. An explicit path
    is loaded directly and not cached.
    """
    get_config.cache_clear()
    if config_path:
        return load_config(config_path)
    return get_config()
