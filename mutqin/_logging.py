"""
Structured logging utilities for Mutqin library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from mutqin.exceptions import ConfigurationError


# Default format for Mutqin logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "mutqin") -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "mutqin")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the Mutqin library.

    Args:
        level: Logging level or level name (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for mutqin

    Raises:
        ConfigurationError: If level is not a known logging level name
    """
    if isinstance(level, str):
        level_name = level.upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {level_name}", setting_name="log_level")

    logger = logging.getLogger("mutqin")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the Mutqin library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all Mutqin logging."""
    logger = logging.getLogger("mutqin")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


# Create default logger
_logger = get_logger()


def log_dataset_loaded(path: str | Path, verse_count: int, duration: float) -> None:
    """Log dataset load event."""
    _logger.info(f"Loaded {verse_count} verses from {path} in {duration:.2f}s")


def log_invariants_checked(verse_count: int, page_count: int, ruku_count: int) -> None:
    """Log a successful invariant check."""
    _logger.debug(
        f"Dataset invariants hold: {verse_count} verses, "
        f"{page_count} pages, {ruku_count} rukus"
    )


def log_pool_built(range_count: int, pool_size: int) -> None:
    """Log test pool build event."""
    _logger.info(f"Built test pool: {pool_size} verses from {range_count} ranges")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)


def log_error(message: str, exc_info: bool = False, **context) -> None:
    """Log an error with optional context and exception info."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.error(f"{message} ({ctx_str})", exc_info=exc_info)
    else:
        _logger.error(message, exc_info=exc_info)
