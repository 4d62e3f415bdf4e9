"""
sysx Time Module

Sleep-duration parsing and sleeping helpers. ``sysx.time.sleep.sleep`` is
the blocking call; ``safe_sleep`` rejects negative durations.
"""

from . import sleep
from .sleep import SleepTime, safe_sleep

__all__ = ["sleep", "SleepTime", "safe_sleep"]
