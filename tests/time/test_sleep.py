"""
Unit tests for sleep-duration parsing and sleeping.
"""

import time
from datetime import timedelta
from typing import List

import pytest

from sysx.core.exceptions import InvalidTimeFormatError, NegativeDurationError, SleepError
from sysx.time.sleep import SleepTime, safe_sleep, sleep


@pytest.fixture
def recorded_sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Replace time.sleep with a recorder."""
    calls: List[float] = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls


class TestSleepTimeParse:
    """Tests for SleepTime.parse."""

    @pytest.mark.parametrize(
        "text, seconds",
        [
            ("100ms", 0.1),
            ("2s", 2.0),
            ("2", 2.0),
            ("1.5m", 90.0),
            ("1h", 3600.0),
            ("500ns", 5e-7),
            ("  3  ", 3.0),
            ("10MS", 0.01),
            (".5s", 0.5),
            ("0", 0.0),
        ],
    )
    def test_units(self, text: str, seconds: float):
        assert SleepTime.parse(text).seconds == pytest.approx(seconds)

    @pytest.mark.parametrize("text", ["abc", "5x", "", "ms", "1.2.3s", "5 s"])
    def test_invalid_format(self, text: str):
        with pytest.raises(InvalidTimeFormatError):
            SleepTime.parse(text)

    def test_negative(self):
        with pytest.raises(NegativeDurationError):
            SleepTime.parse("-1s")

    def test_errors_share_base(self):
        with pytest.raises(SleepError):
            SleepTime.parse("nope")


class TestSleepTimeCoerce:
    """Tests for SleepTime.coerce and conversions."""

    def test_int_is_milliseconds(self):
        assert SleepTime.coerce(250).seconds == pytest.approx(0.25)

    def test_float_is_seconds(self):
        assert SleepTime.coerce(1.5).seconds == 1.5

    def test_timedelta(self):
        assert SleepTime.coerce(timedelta(milliseconds=20)).seconds == pytest.approx(0.02)

    def test_string(self):
        assert SleepTime.coerce("2m").seconds == 120.0

    def test_sleep_time_passthrough(self):
        value = SleepTime(1.0)
        assert SleepTime.coerce(value) is value

    @pytest.mark.parametrize("value", [True, None, [1]])
    def test_unsupported_types(self, value):
        with pytest.raises(TypeError):
            SleepTime.coerce(value)

    def test_to_timedelta_uses_absolute_value(self):
        assert SleepTime(-1.5).to_timedelta() == timedelta(seconds=1.5)
        assert SleepTime(2.0).total_seconds() == 2.0


class TestSleep:
    """Tests for sleep and safe_sleep."""

    def test_sleep_string(self, recorded_sleeps: List[float]):
        sleep("100ms")
        assert recorded_sleeps == [pytest.approx(0.1)]

    def test_sleep_negative_number_uses_absolute_value(self, recorded_sleeps: List[float]):
        sleep(-0.5)
        assert recorded_sleeps == [pytest.approx(0.5)]

    def test_sleep_invalid_string(self, recorded_sleeps: List[float]):
        with pytest.raises(InvalidTimeFormatError):
            sleep("soon")
        assert recorded_sleeps == []

    def test_safe_sleep(self, recorded_sleeps: List[float]):
        safe_sleep(5)
        assert recorded_sleeps == [pytest.approx(0.005)]

    def test_safe_sleep_negative(self, recorded_sleeps: List[float]):
        with pytest.raises(NegativeDurationError):
            safe_sleep(-0.5)
        assert recorded_sleeps == []

    def test_real_sleep_is_short(self):
        start = time.monotonic()
        safe_sleep("10ms")
        assert time.monotonic() - start >= 0.009
