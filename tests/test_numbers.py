import pytest

from ftformat.numbers import (
    decimal_width,
    digit_count,
    parse_int,
    to_hex,
    to_int32,
    to_uint32,
)


@pytest.mark.parametrize("text", ["42", "+42", "7", "0", "2147483647"])
def test_parse_int_plain(text):
    assert parse_int(text) == int(text)


def test_parse_int_skips_whitespace_and_stops_at_non_digit():
    assert parse_int(" \t\n-17abc") == -17


def test_parse_int_stops_at_dot():
    assert parse_int("12.5") == 12


@pytest.mark.parametrize("text", ["", "abc", "-", None])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


@pytest.mark.parametrize("text", ["2147483648", "-2147483648", "99999999999999"])
def test_parse_int_overflow(text):
    with pytest.raises(OverflowError):
        parse_int(text)


@pytest.mark.parametrize("number", [0, 5, 9, 10, 99, 100, -1, -10, 2147483647, -2147483648])
def test_decimal_width_matches_text_length(number):
    assert decimal_width(number) == len(str(number))


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 256, 4294967295, 2**64 - 1])
def test_digit_count_hex(number):
    assert digit_count(number, 16) == len(format(number, "x"))


@pytest.mark.parametrize("number", [0, 9, 10, 12345, 4294967295])
def test_digit_count_decimal(number):
    assert digit_count(number, 10) == len(str(number))


def test_digit_count_binary():
    assert digit_count(8, 2) == len(bin(8)) - 2


def test_digit_count_rejects_negative():
    with pytest.raises(ValueError):
        digit_count(-1, 10)


def test_digit_count_rejects_bad_base():
    with pytest.raises(ValueError):
        digit_count(5, 1)


def test_to_uint32_wraps_minus_one():
    assert to_uint32(-1) == 0xFFFFFFFF


def test_to_int32_wraps_past_int_max():
    assert to_int32(2147483647 + 1) == -2147483648


@pytest.mark.parametrize("value", [0, 1, -1, 2147483647, -2147483648, 12345, -999])
def test_int32_uint32_round_trip(value):
    assert to_int32(to_uint32(value)) == value


@pytest.mark.parametrize("value", [0, 1, 2**32 - 1, 2**31])
def test_uint32_is_identity_in_range(value):
    assert to_uint32(value) == value


def test_to_hex_lower_and_upper():
    assert to_hex(255, False) == "ff"
    assert to_hex(255, True) == "FF"


def test_to_hex_zero():
    assert to_hex(0, False) == "0"


@pytest.mark.parametrize("number", [1, 16, 0xDEADBEEF, 2**64 - 1])
def test_to_hex_round_trip(number):
    text = to_hex(number, False)
    assert int(text, 16) == number
    assert text == text.lower()
    assert to_hex(number, True) == text.upper()


def test_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        to_hex(-1, False)