import io

import pytest

from solong.printf import (
    format_printf,
    itoa,
    pointer_hex,
    print_formatted,
    to_hex,
    utoa,
)


@pytest.mark.parametrize("n", [0, 7, -7, 10, -10, 12345, 2**31 - 1, -(2**31)])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


@pytest.mark.parametrize("n", [0, 9, 10, 4000000000, 2**32 - 1])
def test_utoa_round_trip(n):
    assert int(utoa(n)) == n


@pytest.mark.parametrize("n", [-1, 2**32])
def test_utoa_out_of_range(n):
    with pytest.raises(OverflowError):
        utoa(n)


def test_to_hex_zero():
    assert to_hex(0, False) == "0"


@pytest.mark.parametrize("n", [1, 15, 16, 255, 48879, 2**32 - 1])
def test_to_hex_round_trip_and_case(n):
    lower = to_hex(n, False)
    upper = to_hex(n, True)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_to_hex_out_of_range():
    with pytest.raises(OverflowError):
        to_hex(2**32, False)


def test_pointer_hex_null():
    assert pointer_hex(None) == "0x0"
    assert pointer_hex(0) == "0x0"


@pytest.mark.parametrize("value", [1, 4096, 2**48 + 17, 2**64 - 1])
def test_pointer_hex_round_trip(value):
    text = pointer_hex(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value


def test_plain_text_passes_through():
    assert format_printf("Movements:") == "Movements:"


def test_string_and_null_string():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_printf("%c%c", "x", ord("y")) == "xy"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_signed_conversions():
    assert format_printf("%d", -2147483648) == "-2147483648"
    assert format_printf("%i|%d", 42, -42) == "42|-42"


def test_signed_wraps_like_int():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_conversions():
    lower = format_printf("%x", 3054)
    upper = format_printf("%X", 3054)
    assert int(lower, 16) == 3054
    assert upper == lower.upper()
    assert format_printf("%x", 0) == "0"


def test_pointer_conversion():
    assert format_printf("%p", None) == "0x0"
    assert format_printf("%p", 4096) == pointer_hex(4096)


def test_unsupported_conversion():
    with pytest.raises(ValueError):
        format_printf("%q", 1)


def test_trailing_percent():
    with pytest.raises(ValueError):
        format_printf("oops%")


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        format_printf("%d", "seven")


def test_print_formatted_writes_and_counts():
    stream = io.StringIO()
    count = print_formatted("%s=%d%%", "moves", 12, stream=stream)
    assert stream.getvalue() == "moves=12%"
    assert count == len(stream.getvalue())


def test_print_formatted_null_string_count():
    stream = io.StringIO()
    assert print_formatted("%s", None, stream=stream) == 6
    assert stream.getvalue() == "(null)"


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%c", "Z")
    assert capsys.readouterr().out == "Z"
    assert count == 1