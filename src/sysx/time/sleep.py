"""
Sleep-duration parsing and sleeping.

Durations can be given as milliseconds (``int``), seconds (``float``),
``timedelta`` objects or strings with an optional unit suffix
(``"100ms"``, ``"2s"``, ``"1.5m"``, ``"1h"``, ``"500ns"``).
"""

import re
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, Union

from ..core.exceptions import InvalidTimeFormatError, NegativeDurationError
from ..core.logging import get_logger

logger = get_logger(__name__)

# Seconds per unit
UNIT_MULTIPLIERS: Dict[str, float] = {
    "ns": 1e-9,
    "ms": 1e-3,
    "s": 1.0,
    "": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PATTERN = re.compile(r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))(?P<unit>[a-z]*)$")


@dataclass(frozen=True)
class SleepTime:
    """A sleep duration, stored as seconds."""

    seconds: float

    @classmethod
    def from_millis(cls, millis: int) -> "SleepTime":
        return cls(millis / 1000.0)

    @classmethod
    def from_seconds(cls, seconds: float) -> "SleepTime":
        return cls(float(seconds))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "SleepTime":
        return cls(delta.total_seconds())

    @classmethod
    def parse(cls, text: str) -> "SleepTime":
        """
        Parse a duration string.

        Args:
            text: Number with optional unit (ns, ms, s, m, h); seconds by default

        Returns:
            Parsed SleepTime

        Raises:
            InvalidTimeFormatError: If the number or unit is not recognized
            NegativeDurationError: If the number is negative
        """
        normalized = text.strip().lower()
        match = _DURATION_PATTERN.match(normalized)
        if match is None or match.group("unit") not in UNIT_MULTIPLIERS:
            raise InvalidTimeFormatError(
                f"Invalid time format: {normalized!r}",
                {"units": sorted(u for u in UNIT_MULTIPLIERS if u)},
            )

        number = float(match.group("number"))
        if number < 0:
            raise NegativeDurationError(f"Negative sleep time: {normalized!r}")

        return cls(number * UNIT_MULTIPLIERS[match.group("unit")])

    @classmethod
    def coerce(cls, value: "SleepInput") -> "SleepTime":
        """
        Convert any accepted duration input to a SleepTime.

        ``int`` is milliseconds, ``float`` is seconds, ``str`` is parsed.
        """
        if isinstance(value, SleepTime):
            return value
        if isinstance(value, timedelta):
            return cls.from_timedelta(value)
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, bool):
            raise TypeError("bool is not a valid sleep duration")
        if isinstance(value, int):
            return cls.from_millis(value)
        if isinstance(value, float):
            return cls.from_seconds(value)
        raise TypeError(f"Unsupported sleep duration type: {type(value).__name__}")

    def total_seconds(self) -> float:
        return self.seconds

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, using the absolute value of the duration."""
        return timedelta(seconds=abs(self.seconds))


SleepInput = Union[int, float, str, timedelta, SleepTime]


def sleep(value: SleepInput) -> None:
    """
    Block the current thread for the given duration.

    Negative numeric durations sleep for their absolute value.

    Raises:
        InvalidTimeFormatError: If a string duration cannot be parsed
        NegativeDurationError: If a string duration is negative
    """
    duration = SleepTime.coerce(value).to_timedelta()
    logger.debug("Sleeping for %.6fs", duration.total_seconds())
    time.sleep(duration.total_seconds())


def safe_sleep(value: SleepInput) -> None:
    """
    Block the current thread, rejecting negative durations.

    Raises:
        InvalidTimeFormatError: If a string duration cannot be parsed
        NegativeDurationError: If the duration is negative
    """
    sleep_time = SleepTime.coerce(value)
    if sleep_time.seconds < 0:
        raise NegativeDurationError(
            "Negative sleep time", {"seconds": sleep_time.seconds}
        )
    time.sleep(sleep_time.seconds)
