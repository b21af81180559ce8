import io

import pytest

from wireframe.numbers import (
    abs_int,
    format_int,
    parse_int,
    parse_prefixed_int,
    write_int,
)


@pytest.mark.parametrize("value", [0, 7, 42, -42, 123456, -2147483648, 2147483647])
def test_parse_int_round_trips_format(value):
    assert parse_int(format_int(value)) == value


def test_parse_int_skips_whitespace_and_sign():
    assert parse_int(" \t\n\v\f\r-17") == -17
    assert parse_int("  +17") == 17


def test_parse_int_stops_at_non_digit():
    assert parse_int("12,0xFF") == 12
    assert parse_int("34abc") == 34


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int("-") == 0


def test_parse_int_only_one_sign():
    assert parse_int("+-5") == 0
    assert parse_int("--5") == 0


def test_parse_int_long_overflow_positive():
    assert parse_int("9223372036854775807") == -1
    assert parse_int("99999999999999999999999") == -1


def test_parse_int_long_overflow_negative():
    assert parse_int("-9223372036854775808") == 0


def test_parse_int_wraps_to_32_bits():
    assert parse_int("4294967296") == 0
    assert parse_int("2147483648") == -2147483648


@pytest.mark.parametrize("digits", ["FF", "ff", "1A2b", "0", "7fffffff"])
def test_parse_prefixed_int_hex(digits):
    assert parse_prefixed_int("0x" + digits, 16) == int(digits, 16)


def test_parse_prefixed_int_color_value():
    assert parse_prefixed_int("0xFF0000", 16) == 0xFF0000


def test_parse_prefixed_int_skips_exactly_two_characters():
    assert parse_prefixed_int("ab10", 10) == 10
    assert parse_prefixed_int("0x  -10", 16) == -16


def test_parse_prefixed_int_stops_at_out_of_base_digit():
    assert parse_prefixed_int("0x12g4", 16) == 0x12
    assert parse_prefixed_int("0b1012", 2) == 0b101


def test_parse_prefixed_int_short_text_is_zero():
    assert parse_prefixed_int("0x", 16) == 0
    assert parse_prefixed_int("", 16) == 0


@pytest.mark.parametrize("value", [0, 1, 5, 99, 2147483647])
def test_abs_int_symmetric(value):
    assert abs_int(value) == value
    assert abs_int(-value) == value


@pytest.mark.parametrize("value", [0, 9, -9, 10, -10, -2147483648])
def test_format_int_matches_parse(value):
    text = format_int(value)
    assert text.startswith("-") == (value < 0)
    assert parse_int(text) == value


def test_write_int_to_stream():
    stream = io.StringIO()
    write_int(-2147483648, stream)
    write_int(7, stream)
    assert stream.getvalue() == "-21474836487"


def test_write_int_defaults_to_stdout(capsys):
    write_int(305, None)
    assert capsys.readouterr().out == "305"