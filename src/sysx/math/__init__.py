"""
sysx Math Module

Binary/hex digit-string codecs and integer helpers.
"""

from . import bin, hex
from .parity import is_even, is_even_or_odd, is_odd
from .radix import BINARY, DIGITS_PER_BYTE, HEX, RadixCodec

__all__ = [
    "bin",
    "hex",
    "BINARY",
    "HEX",
    "DIGITS_PER_BYTE",
    "RadixCodec",
    "is_even",
    "is_odd",
    "is_even_or_odd",
]
