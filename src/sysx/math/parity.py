"""Integer parity checks."""

from typing import Tuple


def is_even(num: int) -> bool:
    """Check if a number is even using a bitwise AND."""
    return num & 1 == 0


def is_odd(num: int) -> bool:
    """Check if a number is odd using a bitwise AND."""
    return num & 1 != 0


def is_even_or_odd(num: int) -> Tuple[bool, bool]:
    """Return ``(is_even, is_odd)`` from a single bitwise test."""
    even = num & 1 == 0
    return even, not even
