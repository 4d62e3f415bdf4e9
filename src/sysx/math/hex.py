"""
Hexadecimal digit-string codec.

Every byte is written as two hex digits. Input is case-insensitive, output
of ``encode`` is always uppercase::

    >>> encode("Hello")
    '48 65 6C 6C 6F'
    >>> decode("48z65$6C\\n6C_6F")
    'Hello'
"""

from .radix import HEX

DIGITS_PER_BYTE = HEX.digits_per_byte

clean = HEX.clean
decode = HEX.decode
decode_bytes = HEX.decode_bytes
encode = HEX.encode
encode_bytes = HEX.encode_bytes
check = HEX.check
check_strict = HEX.check_strict
format = HEX.format

is_valid = check
is_valid_strict = check_strict


def to_uppercase(data: str) -> str:
    """Clean ``data`` and return its hex digits in uppercase."""
    return clean(data).upper()


def to_lowercase(data: str) -> str:
    """Clean ``data`` and return its hex digits in lowercase."""
    return clean(data).lower()


__all__ = [
    "DIGITS_PER_BYTE",
    "clean",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "check",
    "check_strict",
    "format",
    "is_valid",
    "is_valid_strict",
    "to_uppercase",
    "to_lowercase",
]
