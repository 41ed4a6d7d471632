import io

import pytest

from sigtalk.printf import format_printf, printf


def test_decimal():
    assert format_printf("%d", 42) == "42"


def test_integer_alias():
    assert format_printf("%i", -42) == format_printf("%d", -42)


def test_decimal_round_trip():
    assert all(int(format_printf("%d", n)) == n for n in range(-300, 300, 7))


def test_decimal_wraps_to_int():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_decimal_minimum():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_unsigned_of_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_lower_hex_round_trip():
    text = format_printf("%x", 48879)
    assert int(text, 16) == 48879
    assert text == text.lower()


def test_upper_hex_matches_lower():
    assert format_printf("%X", 48879) == format_printf("%x", 48879).upper()


def test_string():
    assert format_printf("<%s>", "hi") == "<hi>"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_null_pointer():
    assert format_printf("%p", 0) == "(nil)"


def test_pointer():
    text = format_printf("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_char_from_int():
    assert format_printf("%c", ord("z")) == "z"


def test_char_from_str():
    assert format_printf("[%c]", "q") == "[q]"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_is_dropped():
    assert format_printf("a%qb", 5) == "ab"


def test_trailing_percent():
    assert format_printf("ab%") == "ab"


def test_mixed_arguments_in_order():
    assert format_printf("%s=%d", "n", 3) == "n=3"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_none_format():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts():
    buffer = io.StringIO()
    count = printf("pid %d: %s\n", 1234, "ok", file=buffer)
    assert buffer.getvalue() == format_printf("pid %d: %s\n", 1234, "ok")
    assert count == len(buffer.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "hello")
    assert capsys.readouterr().out == "hello"
    assert count == len("hello")