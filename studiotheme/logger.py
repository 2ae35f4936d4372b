"""Logging configuration using loguru.

Logs are stored under the user's data directory and kept for 1 week.
Console output goes to stderr only when requested, so the generated command
on stdout stays clean enough to paste.
"""

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru


# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/studiotheme/logs, overridable via STUDIOTHEME_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "studiotheme" / "logs"
LOG_DIR = Path(os.environ.get("STUDIOTHEME_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

STDERR_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


class _LoggingState:
    """Internal state tracker for logging configuration.

    Note: stderr handler is NOT added by default. The CLI enables it once the
    requested level is known.
    """

    def __init__(self) -> None:
        """Initialize logging state without stderr handler."""
        self.stderr_handler_id: int | None = None


_state = _LoggingState()

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "studiotheme_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    rotation="00:00",  # New file at midnight
    retention="1 week",  # Keep logs for 1 week
    compression="gz",  # Compress old logs
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def enable_console_logging(level: str = "WARNING") -> int:
    """Send log records at or above ``level`` to stderr.

    Calling this again replaces the previous stderr handler.

    Args:
        level: Minimum log level for the stderr sink.

    Returns:
        The sink ID of the stderr handler.
    """
    disable_console_logging()
    _state.stderr_handler_id = logger.add(
        sys.stderr,
        level=level,
        format=STDERR_FORMAT,
        colorize=True,
    )
    return _state.stderr_handler_id


def disable_console_logging() -> None:
    """Remove the stderr handler if one is installed."""
    if _state.stderr_handler_id is not None:
        logger.remove(_state.stderr_handler_id)
        _state.stderr_handler_id = None
