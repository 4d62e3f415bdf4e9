"""
sysx Exception Hierarchy

Defines the exception hierarchy shared by every sysx module.
"""

from typing import Any, Dict, Optional


class SysxError(Exception):
    """Base exception for all sysx errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class InvalidSyntaxError(SysxError):
    """Malformed input (bad digit string, bad charset, incomparable range)."""

    pass


class DigitCountError(InvalidSyntaxError):
    """Cleaned digit string is empty or not a whole number of bytes."""

    pass


class Utf8DecodeError(InvalidSyntaxError):
    """Decoded bytes are not valid UTF-8."""

    pass


class ParseIntError(SysxError):
    """A digit group could not be parsed as an unsigned byte."""

    pass


class EnvVarNotFoundError(SysxError):
    """Environment variable is neither in the process environment nor in the cache."""

    pass


class SleepError(SysxError):
    """Sleep-duration errors."""

    pass


class InvalidTimeFormatError(SleepError):
    """Duration string could not be parsed."""

    pass


class NegativeDurationError(SleepError):
    """Negative sleep duration."""

    pass


class CommandError(SysxError):
    """Command-line parsing or process execution errors."""

    pass


class CommandTimeoutError(CommandError):
    """Process did not finish within its timeout."""

    pass


class ConfigurationError(SysxError):
    """Configuration-related errors."""

    pass


class FileSystemError(SysxError):
    """File or directory operation failed."""

    pass


class InvalidPermissionsError(FileSystemError):
    """Permission string is not a valid octal Unix mode."""

    pass
