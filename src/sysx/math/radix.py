"""
Radix digit-string codec.

Converts between text and its binary (base-2) or hexadecimal (base-16)
digit-string representation. Each byte maps to a fixed-width group of digits,
most significant digit first.
"""

import string
from typing import Dict, FrozenSet, List

from ..core.exceptions import DigitCountError, ParseIntError, Utf8DecodeError

# Digits needed to write one byte in each supported radix
DIGITS_PER_BYTE: Dict[int, int] = {2: 8, 16: 2}

_RADIX_DIGITS: Dict[int, FrozenSet[str]] = {
    2: frozenset("01"),
    16: frozenset(string.hexdigits),
}

_RADIX_NAMES: Dict[int, str] = {2: "Binary", 16: "Hexadecimal"}


class RadixCodec:
    """
    Bidirectional codec between text and a fixed-radix digit string.

    Every operation is a pure function of its input, so a single instance
    can be shared freely between threads.
    """

    def __init__(self, radix: int) -> None:
        """
        Create a codec for the given radix.

        Args:
            radix: 2 for binary or 16 for hexadecimal

        Raises:
            ValueError: If the radix is unsupported
        """
        if radix not in DIGITS_PER_BYTE:
            raise ValueError(
                f"Unsupported radix: {radix}. Must be one of {sorted(DIGITS_PER_BYTE)}"
            )
        self.radix = radix
        self.digits_per_byte = DIGITS_PER_BYTE[radix]
        self.name = _RADIX_NAMES[radix]
        self._digits = _RADIX_DIGITS[radix]

    def __repr__(self) -> str:
        return f"RadixCodec(radix={self.radix})"

    def is_digit(self, char: str) -> bool:
        """Check whether a single character is a valid digit in this radix."""
        return char in self._digits

    def clean(self, data: str) -> str:
        """
        Keep only the valid radix digits of the input, in order.

        Args:
            data: Arbitrary text

        Returns:
            The digits of ``data``; empty if there are none
        """
        return "".join(c for c in data if c in self._digits)

    def decode_bytes(self, data: str) -> bytes:
        """
        Decode a (possibly noisy) digit string into bytes.

        Args:
            data: Digit string, separators and noise allowed

        Returns:
            Decoded bytes

        Raises:
            DigitCountError: If the cleaned string is empty or misaligned
            ParseIntError: If a digit group cannot be parsed
        """
        cleaned = self._aligned(data)
        size = self.digits_per_byte
        values = []
        for offset in range(0, len(cleaned), size):
            group = cleaned[offset : offset + size]
            try:
                value = int(group, self.radix)
            except ValueError as e:
                raise ParseIntError(
                    f"Invalid {self.name.lower()} digit group: {group!r}",
                    {"offset": offset, "radix": self.radix},
                ) from e
            if not 0 <= value <= 0xFF:
                raise ParseIntError(
                    f"Digit group out of byte range: {group!r}",
                    {"offset": offset, "radix": self.radix},
                )
            values.append(value)
        return bytes(values)

    def decode(self, data: str) -> str:
        """
        Decode a (possibly noisy) digit string into UTF-8 text.

        Args:
            data: Digit string, separators and noise allowed

        Returns:
            Decoded text

        Raises:
            DigitCountError: If the cleaned string is empty or misaligned
            ParseIntError: If a digit group cannot be parsed
            Utf8DecodeError: If the decoded bytes are not valid UTF-8
        """
        raw = self.decode_bytes(data)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise Utf8DecodeError(
                f"Invalid UTF-8 sequence: {e.reason}",
                {"position": e.start, "byte_count": len(raw)},
            ) from e

    def encode_bytes(self, data: bytes) -> str:
        """Render bytes as space-separated, zero-padded digit groups."""
        fmt = "0{}{}".format(self.digits_per_byte, "b" if self.radix == 2 else "X")
        return " ".join(format(b, fmt) for b in data)

    def encode(self, text: str) -> str:
        """
        Encode text as a digit string.

        Each UTF-8 byte becomes a group of ``digits_per_byte`` digits
        (uppercase for hex), groups joined by a single space.

        Args:
            text: Text to encode

        Returns:
            Digit string; empty for empty input
        """
        return self.encode_bytes(text.encode("utf-8"))

    def check(self, data: str) -> bool:
        """
        Lenient validation: non-empty, and only digits or whitespace.

        Byte alignment is not required.
        """
        return bool(data) and all(c.isspace() or c in self._digits for c in data)

    def check_strict(self, data: str) -> bool:
        """
        Strict validation: with whitespace removed, a non-empty whole number
        of bytes made of digits only.
        """
        stripped = "".join(c for c in data if not c.isspace())
        return (
            bool(stripped)
            and len(stripped) % self.digits_per_byte == 0
            and all(c in self._digits for c in stripped)
        )

    def format(self, data: str) -> str:
        """
        Regroup the digits of ``data`` into space-separated byte groups.

        Args:
            data: Digit string, separators and noise allowed

        Returns:
            Digits grouped per byte, e.g. ``"48 65"``

        Raises:
            DigitCountError: If the cleaned string is empty or misaligned
        """
        return " ".join(self._groups(self._aligned(data)))

    def _groups(self, cleaned: str) -> List[str]:
        size = self.digits_per_byte
        return [cleaned[i : i + size] for i in range(0, len(cleaned), size)]

    def _aligned(self, data: str) -> str:
        """Clean ``data`` and require a non-empty, byte-aligned result."""
        cleaned = self.clean(data)
        if not cleaned or len(cleaned) % self.digits_per_byte != 0:
            raise DigitCountError(
                f"{self.name} string length must be a non-zero multiple of "
                f"{self.digits_per_byte}",
                {"length": len(cleaned)},
            )
        return cleaned


BINARY = RadixCodec(2)
HEX = RadixCodec(16)
