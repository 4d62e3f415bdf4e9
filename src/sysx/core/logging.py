"""
sysx Logging Configuration

Provides centralized logging configuration with colored level output and
structured logging support.
"""

import logging
import logging.config
import sys
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .config import get_config
from .exceptions import ConfigurationError


class LogLevel(IntEnum):
    """Log levels, including the extra ones sysx registers with `logging`.

    FATAL is the standard alias of CRITICAL.
    """

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    SUCCESS = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    BUG = 45
    CRITICAL = logging.CRITICAL
    FATAL = logging.FATAL

    def style(self) -> Dict[str, Any]:
        """Return the click.style keyword arguments for this level."""
        return _LEVEL_STYLES[self]


_LEVEL_STYLES: Dict[LogLevel, Dict[str, Any]] = {
    LogLevel.TRACE: {"fg": "cyan"},
    LogLevel.DEBUG: {"fg": "magenta"},
    LogLevel.INFO: {"fg": "blue"},
    LogLevel.SUCCESS: {"fg": "green"},
    LogLevel.WARNING: {"fg": "yellow"},
    LogLevel.ERROR: {"fg": "red"},
    LogLevel.BUG: {"fg": "bright_red"},
    LogLevel.CRITICAL: {"fg": "bright_red", "bold": True},
}

_CUSTOM_LEVELS = (LogLevel.TRACE, LogLevel.SUCCESS, LogLevel.BUG)


def register_levels() -> None:
    """Register the custom level names with the logging module."""
    for level in _CUSTOM_LEVELS:
        logging.addLevelName(level.value, level.name)


register_levels()


class StructuredFormatter(logging.Formatter):
    """Custom formatter that adds structured data to log records."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if hasattr(record, "structured_data"):
            formatted = f"{formatted} | Data: {record.structured_data}"
        return formatted


class ColoredFormatter(StructuredFormatter):
    """Formatter that colors the level name and dims the timestamp."""

    def format(self, record: logging.LogRecord) -> str:
        try:
            style = LogLevel(record.levelno).style()
        except ValueError:
            style = {}
        original = record.levelname
        record.levelname = click.style(original, **style)
        try:
            return super().format(record)
        finally:
            record.levelname = original

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return click.style(super().formatTime(record, datefmt), dim=True)


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    enable_colors: Optional[bool] = None,
) -> None:
    """
    Configure logging for sysx.

    Args:
        log_level: Logging level name (TRACE through FATAL)
        log_file: Path to log file (if None, logs to console only)
        enable_colors: Colorize console output (defaults to config when
            stderr is a terminal)

    Raises:
        ConfigurationError: If the log level is unknown
    """
    config = get_config()

    level = (log_level or config.logging.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Invalid log level: {level}")
    if enable_colors is None:
        # Escape codes only go to a terminal unless explicitly requested
        colored = config.logging.colored and sys.stderr.isatty()
    else:
        colored = enable_colors

    if log_file is None and config.logging.file_path:
        log_file = Path(config.logging.file_path)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "()": StructuredFormatter,
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": sys.stderr,
            }
        },
        "loggers": {
            "sysx": {"level": level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }

    if colored:
        logging_config["formatters"]["colored"] = {
            "()": ColoredFormatter,
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
        logging_config["handlers"]["console"]["formatter"] = "colored"

    if log_file:
        logging_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": str(log_file),
            "maxBytes": config.logging.max_file_size,
            "backupCount": config.logging.backup_count,
            "encoding": "utf-8",
        }
        logging_config["loggers"]["sysx"]["handlers"].append("file")
        logging_config["root"]["handlers"].append("file")

    logging.config.dictConfig(logging_config)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_structured(
    logger: logging.Logger, level: int, message: str, **structured_data: Any
) -> None:
    """
    Log a message with structured data.

    Args:
        logger: Logger instance
        level: Logging level
        message: Log message
        **structured_data: Additional structured data to include
    """
    if not logger.isEnabledFor(level):
        return
    record = logger.makeRecord(logger.name, level, "", 0, message, (), None)
    record.structured_data = structured_data
    logger.handle(record)


def success(logger: logging.Logger, message: str, *args: Any) -> None:
    """Log at SUCCESS level."""
    logger.log(LogLevel.SUCCESS, message, *args)


def trace(logger: logging.Logger, message: str, *args: Any) -> None:
    """Log at TRACE level."""
    logger.log(LogLevel.TRACE, message, *args)


def bug(logger: logging.Logger, message: str, *args: Any) -> None:
    """Log at BUG level."""
    logger.log(LogLevel.BUG, message, *args)


def fatal(logger: logging.Logger, message: str, *args: Any) -> None:
    """Log at FATAL (CRITICAL) level."""
    logger.log(LogLevel.FATAL, message, *args)
