"""Persistent settings for studiotheme."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from studiotheme.locator import default_extensions_dir
from studiotheme.logger import get_logger
from studiotheme.table import DEFAULT_COLUMNS

logger = get_logger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

# Theme list grid settings
MIN_GRID_COLUMNS = 1
MAX_GRID_COLUMNS = 8


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    extensions_dir: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    grid_columns: int = DEFAULT_COLUMNS

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        extensions_dir = _coerce_str(data.get("extensions_dir")) or None

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = (
            log_level_value.upper()
            if log_level_value is not None and log_level_value.upper() in LOG_LEVELS
            else DEFAULT_LOG_LEVEL
        )

        grid_columns = _coerce_int(data.get("grid_columns"))
        if grid_columns is None or grid_columns < MIN_GRID_COLUMNS or grid_columns > MAX_GRID_COLUMNS:
            grid_columns = DEFAULT_COLUMNS

        return cls(extensions_dir=extensions_dir, log_level=log_level, grid_columns=grid_columns)


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("STUDIOTHEME_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "studiotheme"

    return Path.home() / ".config" / "studiotheme"


def get_settings_path() -> Path:
    """Get the full path to the settings file.

    Returns:
        Path to the settings JSON file.
    """
    return get_config_dir() / "settings.json"


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse settings file {settings_path}: {exc}")
        return Settings()
    except OSError as exc:
        logger.warning(f"Failed to read settings file {settings_path}: {exc}")
        return Settings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_path} contains invalid data")
        return Settings()

    return Settings.from_mapping(raw)


def get_extensions_dir(settings: Settings) -> Path:
    """Get the directory scanned for installed themes.

    ``STUDIOTHEME_EXTENSIONS_DIR`` takes precedence over the settings file.

    Args:
        settings: Loaded settings.

    Returns:
        Path to the extensions directory.
    """
    override_dir = os.environ.get("STUDIOTHEME_EXTENSIONS_DIR")
    if override_dir:
        return Path(override_dir).expanduser()
    if settings.extensions_dir:
        return Path(settings.extensions_dir).expanduser()
    return default_extensions_dir()


def _coerce_str(value: object) -> str | None:
    """Coerce a value into a string if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        String value or None.
    """
    if isinstance(value, str):
        return value
    return None


def _coerce_int(value: object) -> int | None:
    """Coerce a value into an integer if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        Integer value or None.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
