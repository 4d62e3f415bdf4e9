"""
Random value generation.

Every function accepts an optional ``random.Random`` instance; without one
the module-level generator is used.
"""

import math
import random
import string
from typing import Iterator, Optional, Tuple, TypeVar, Union

from ..core.exceptions import InvalidSyntaxError

Number = TypeVar("Number", int, float)

DEFAULT_CHARSET = string.ascii_letters + string.digits

_default_rng = random.Random()


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else _default_rng


def _is_nan(value: Union[int, float]) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _ordered(low: Number, high: Number) -> Tuple[Number, Number]:
    if _is_nan(low) or _is_nan(high):
        raise InvalidSyntaxError(
            "Invalid range comparison: cannot compare given values",
            {"min": low, "max": high},
        )
    return (high, low) if low > high else (low, high)


def _sample(gen: random.Random, low: Number, high: Number) -> Number:
    if isinstance(low, int) and isinstance(high, int):
        return gen.randint(low, high)
    # uniform() may round past the upper bound
    return min(max(gen.uniform(low, high), low), high)


def random_value(
    low: Number, high: Number, rng: Optional[random.Random] = None
) -> Number:
    """
    Return a random value in the inclusive range ``[low, high]``.

    Reversed bounds are swapped. Two ints give an int, otherwise a float.

    Raises:
        InvalidSyntaxError: If the bounds cannot be compared (NaN)
    """
    low, high = _ordered(low, high)
    return _sample(_rng(rng), low, high)


def random_bool(rng: Optional[random.Random] = None) -> bool:
    """Return True or False with equal probability."""
    return _rng(rng).random() < 0.5


def random_string(
    length: int, charset: Optional[str] = None, rng: Optional[random.Random] = None
) -> str:
    """
    Return a random string drawn from ``charset`` (alphanumerics by default).

    Raises:
        InvalidSyntaxError: If an empty charset is provided
    """
    if charset is not None and not charset:
        raise InvalidSyntaxError("Provided charset is empty")
    pool = charset or DEFAULT_CHARSET
    gen = _rng(rng)
    return "".join(gen.choice(pool) for _ in range(length))


def random_bytes(length: int, rng: Optional[random.Random] = None) -> bytes:
    """Return ``length`` random bytes."""
    gen = _rng(rng)
    return bytes(gen.getrandbits(8) for _ in range(length))


def random_range(values: range, rng: Optional[random.Random] = None) -> int:
    """
    Return a random member of a ``range``.

    Raises:
        InvalidSyntaxError: If the range is empty
    """
    if not values:
        raise InvalidSyntaxError("Cannot sample from an empty range", {"range": values})
    return _rng(rng).choice(values)


def random_ratio(
    numerator: int, denominator: int, rng: Optional[random.Random] = None
) -> bool:
    """
    Return True with probability ``numerator / denominator``.

    Raises:
        InvalidSyntaxError: If the denominator is zero or the ratio exceeds 1
    """
    if denominator == 0:
        raise InvalidSyntaxError("Denominator cannot be zero")
    if not 0 <= numerator <= denominator:
        raise InvalidSyntaxError(
            "Ratio must be between 0 and 1",
            {"numerator": numerator, "denominator": denominator},
        )
    return _rng(rng).randrange(denominator) < numerator


def random_iter(
    low: Number, high: Number, rng: Optional[random.Random] = None
) -> Iterator[Number]:
    """
    Return an infinite iterator of random values in ``[low, high]``.

    Bounds are validated eagerly.

    Raises:
        InvalidSyntaxError: If the bounds cannot be compared (NaN)
    """
    low, high = _ordered(low, high)
    gen = _rng(rng)

    def generate() -> Iterator[Number]:
        while True:
            yield _sample(gen, low, high)

    return generate()
