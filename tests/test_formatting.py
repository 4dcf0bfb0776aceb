import io

import pytest

from ftping.formatting import (
    format_message,
    format_pointer,
    format_unsigned,
    print_formatted,
)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 48879, 2147483647])
def test_format_unsigned_hex_round_trip(n):
    assert int(format_unsigned(n, "x"), 16) == n


@pytest.mark.parametrize("n", [0, 9, 10, 4096, 3000000000])
def test_format_unsigned_decimal_round_trip(n):
    assert int(format_unsigned(n, "u")) == n


def test_format_unsigned_upper_matches_lower():
    assert format_unsigned(48879, "X") == format_unsigned(48879, "x").upper()


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1, "x"), 16) == 0xFFFFFFFF


def test_format_unsigned_rejects_unknown_spec():
    with pytest.raises(ValueError):
        format_unsigned(5, "d")


def test_format_pointer_null():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("value", [1, 4096, 140737488355328])
def test_format_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value


def test_string_conversion():
    assert format_message("ping: %s: %s", "host", "Name or service not known") == (
        "ping: host: Name or service not known"
    )


def test_null_string():
    assert format_message("%s", None) == "(null)"


def test_decimal_conversion_source_value():
    assert format_message("%d", -2147483647) == "-2147483647"


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_message("%i", n)) == n


def test_char_conversion():
    assert format_message("%c%c", "A", ord("b")) == "Ab"


def test_percent_escape():
    assert format_message("100%%") == "100%"


def test_unknown_conversion_kept():
    assert format_message("a%qb") == "a%qb"


def test_trailing_percent_kept():
    assert format_message("50%") == "50%"


def test_banner_line():
    assert format_message("PING %s (%s): 64 data bytes\n", "host", "10.0.0.1") == (
        "PING host (10.0.0.1): 64 data bytes\n"
    )


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%s and %s", "one")


def test_print_formatted_writes_and_counts():
    buf = io.StringIO()
    count = print_formatted("%s=%d %x", "value", 17, 255, stream=buf)
    assert buf.getvalue() == format_message("%s=%d %x", "value", 17, 255)
    assert count == len(buf.getvalue())


def test_print_formatted_default_stdout(capsys):
    print_formatted("%s", "out")
    assert capsys.readouterr().out == "out"