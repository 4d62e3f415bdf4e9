"""
sysx Utils Module

Random value generation helpers.
"""

from .rand import (
    random_bool,
    random_bytes,
    random_iter,
    random_range,
    random_ratio,
    random_string,
    random_value,
)

__all__ = [
    "random_value",
    "random_bool",
    "random_string",
    "random_bytes",
    "random_range",
    "random_ratio",
    "random_iter",
]
