"""
Binary digit-string codec.

Every byte is written as eight ``0``/``1`` digits::

    >>> encode("Hi")
    '01001000 01101001'
    >>> decode("0100 1000 !@#")
    'H'
"""

from .radix import BINARY

DIGITS_PER_BYTE = BINARY.digits_per_byte

clean = BINARY.clean
decode = BINARY.decode
decode_bytes = BINARY.decode_bytes
encode = BINARY.encode
encode_bytes = BINARY.encode_bytes
check = BINARY.check
check_strict = BINARY.check_strict
format = BINARY.format

is_valid = check
is_valid_strict = check_strict

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
]
