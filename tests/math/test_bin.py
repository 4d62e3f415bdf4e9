"""
Unit tests for the binary digit-string codec.
"""

import pytest

from sysx.core.exceptions import DigitCountError, InvalidSyntaxError, Utf8DecodeError
from sysx.math import bin as binary


class TestBinaryClean:
    """Tests for binary.clean."""

    def test_strips_non_binary_characters(self):
        assert binary.clean("01a2b3c") == "01"
        assert binary.clean("1100!@#") == "1100"

    def test_empty_input(self):
        assert binary.clean("") == ""

    def test_removes_whitespace(self):
        assert binary.clean("0100 1000\t\n") == "01001000"


class TestBinaryDecode:
    """Tests for binary.decode."""

    def test_single_byte(self):
        assert binary.decode("01001000") == "H"

    def test_multiple_bytes(self):
        assert binary.decode("0100000101000010") == "AB"
        assert binary.decode("01001000 01100101 01101100 01101100 01101111") == "Hello"

    def test_noise_and_separators_ignored(self):
        assert binary.decode("0100 1000 !@#") == "H"

    def test_empty_input_rejected(self):
        with pytest.raises(DigitCountError):
            binary.decode("")

    def test_no_digits_rejected(self):
        with pytest.raises(DigitCountError):
            binary.decode("hello world")

    def test_misaligned_length(self):
        with pytest.raises(DigitCountError) as exc_info:
            binary.decode("010010")
        assert exc_info.value.details["length"] == 6

    def test_noise_causing_misalignment(self):
        # "01002A01" cleans to six digits
        with pytest.raises(DigitCountError):
            binary.decode("01002A01")

    def test_invalid_utf8(self):
        with pytest.raises(Utf8DecodeError):
            binary.decode("11111111 11111111")

    def test_errors_are_invalid_syntax(self):
        for bad in ("010010", "11111111"):
            with pytest.raises(InvalidSyntaxError):
                binary.decode(bad)

    def test_decode_bytes(self):
        assert binary.decode_bytes("11111111 00000000") == b"\xff\x00"


class TestBinaryEncode:
    """Tests for binary.encode."""

    def test_single_character(self):
        assert binary.encode("H") == "01001000"

    def test_multiple_characters(self):
        assert binary.encode("AB") == "01000001 01000010"

    def test_empty_input(self):
        assert binary.encode("") == ""

    def test_multibyte_character(self):
        # "é" is 0xC3 0xA9 in UTF-8
        assert binary.encode("é") == "11000011 10101001"

    def test_output_length(self):
        text = "sysx!"
        n = len(text.encode("utf-8"))
        assert len(binary.encode(text)) == n * 8 + (n - 1)

    def test_encode_bytes(self):
        assert binary.encode_bytes(b"\x00\x01") == "00000000 00000001"


class TestBinaryValidation:
    """Tests for lenient and strict binary validation."""

    def test_lenient_accepts_whitespace(self):
        assert binary.check("0100 1101")
        assert binary.check("0100\t1101\n")

    def test_lenient_does_not_require_alignment(self):
        assert binary.check("010")

    def test_lenient_rejects_other_digits(self):
        assert not binary.check("0100 2101")

    def test_lenient_rejects_empty(self):
        assert not binary.check("")

    def test_strict_requires_whole_bytes(self):
        assert binary.check_strict("00000000")
        assert not binary.check_strict("0000000")

    def test_strict_ignores_whitespace(self):
        assert binary.check_strict("0100 1000 0110\n0101")

    def test_strict_rejects_empty_and_blank(self):
        assert not binary.check_strict("")
        assert not binary.check_strict("  \t")

    def test_aliases(self):
        assert binary.is_valid is binary.check
        assert binary.is_valid_strict is binary.check_strict


class TestBinaryFormat:
    """Tests for binary.format."""

    def test_groups_by_byte(self):
        assert binary.format("0100000101000010") == "01000001 01000010"

    def test_discards_noise(self):
        dirty = "01001000xyz01100101...01101100   0110110001101111"
        assert binary.format(dirty) == "01001000 01100101 01101100 01101100 01101111"

    def test_misaligned_rejected(self):
        with pytest.raises(DigitCountError):
            binary.format("010010")
        with pytest.raises(DigitCountError):
            binary.format("0100100")

    def test_empty_rejected(self):
        with pytest.raises(DigitCountError):
            binary.format("")


class TestBinaryRoundTrip:
    """Round-trip between encode, format and decode."""

    def test_round_trip(self):
        original = "Test"
        assert binary.decode(binary.encode(original)) == original

    def test_round_trip_through_format(self):
        original = "Test"
        formatted = binary.format(binary.clean(binary.encode(original)))
        assert binary.decode(formatted) == original
