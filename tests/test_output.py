import io

import pytest

from minirt.output import (
    format_string,
    print_formatted,
    put_char,
    put_endl,
    put_number,
    put_str,
)


def test_plain_text_is_copied():
    assert format_string("scene loaded") == "scene loaded"


def test_decimal_conversions():
    assert format_string("%d and %i", 42, -7) == "42 and -7"


def test_string_conversion_and_null():
    assert format_string("[%s]", "sphere") == "[sphere]"
    assert format_string("%s", None) == "(null)"


def test_char_conversion_accepts_str_and_code():
    assert format_string("%c%c", "A", ord("b")) == "Ab"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == "4294967295"


def test_int_wraps_to_32_bits():
    assert format_string("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 123456789])
def test_hex_round_trip(value):
    assert int(format_string("%x", value), 16) == value
    assert format_string("%X", value) == format_string("%x", value).upper()


def test_hex_lowercase_digits():
    assert format_string("%x", 255) == "ff"


def test_null_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_round_trip():
    text = format_string("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_unknown_conversion_consumes_nothing():
    assert format_string("%q%d", 5) == "5"


def test_trailing_percent_dropped():
    assert format_string("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_print_formatted_returns_length(capsys):
    count = print_formatted("%s=%d\n", "fov", 70)
    out = capsys.readouterr().out
    assert out == "fov=70\n"
    assert count == len(out)


def test_put_char_and_str():
    stream = io.StringIO()
    put_char("x", stream)
    put_str("yz", stream)
    assert stream.getvalue() == "xyz"


def test_put_char_rejects_long_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("Finish", stream)
    assert stream.getvalue() == "Finish\n"


@pytest.mark.parametrize("value", [0, 9, 10, -5, -2147483648, 2147483647])
def test_put_number_round_trip(value):
    stream = io.StringIO()
    put_number(value, stream)
    assert int(stream.getvalue()) == value


def test_put_str_defaults_to_stdout(capsys):
    put_str("hello")
    assert capsys.readouterr().out == "hello"