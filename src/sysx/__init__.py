"""
sysx - general-purpose system utilities.

Binary/hex digit-string codecs, socket address validation, sleep-duration
parsing, environment-variable caching, command execution, file helpers and
random values.
"""

from .core.exceptions import (
    CommandError,
    CommandTimeoutError,
    ConfigurationError,
    DigitCountError,
    EnvVarNotFoundError,
    FileSystemError,
    InvalidPermissionsError,
    InvalidSyntaxError,
    InvalidTimeFormatError,
    NegativeDurationError,
    ParseIntError,
    SleepError,
    SysxError,
    Utf8DecodeError,
)

__version__ = "0.1.0"

__all__ = [
    "SysxError",
    "InvalidSyntaxError",
    "DigitCountError",
    "Utf8DecodeError",
    "ParseIntError",
    "EnvVarNotFoundError",
    "SleepError",
    "InvalidTimeFormatError",
    "NegativeDurationError",
    "CommandError",
    "CommandTimeoutError",
    "ConfigurationError",
    "FileSystemError",
    "InvalidPermissionsError",
]
