import io

import pytest

from miniprintf.output import InvalidBaseError
from miniprintf.printf import printf, sprintf


def test_plain_text_round_trip():
    assert sprintf("hello world") == "hello world"


def test_printf_returns_count_and_writes_stream():
    stream = io.StringIO()
    count = printf("value %d and %s", 31, "text", stream=stream)
    out = stream.getvalue()
    assert count == len(out)
    assert out == "value 31 and text"


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "shown")
    assert capsys.readouterr().out == "shown"
    assert count == 5


def test_percent_percent():
    assert sprintf("100%%") == "100%"


def test_trailing_percent_written_as_is():
    assert sprintf("50%") == "50%"


def test_unknown_specifier_writes_character_and_consumes_nothing():
    assert sprintf("%q%d", 4) == "q4"


def test_string_conversion_and_null():
    assert sprintf("%s", "abc") == "abc"
    assert sprintf("%s", None) == "(null)"


def test_char_conversion_from_str_and_int():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", ord("B")) == "B"


@pytest.mark.parametrize("spec", ["d", "i"])
def test_signed_conversion_round_trip(spec):
    for n in (0, 42, -42, 2147483647):
        assert int(sprintf("%" + spec, n)) == n


def test_signed_minimum():
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_unsigned_conversion_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1


def test_hex_conversions():
    lower = sprintf("%x", 48879)
    upper = sprintf("%X", 48879)
    assert int(lower, 16) == 48879
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_pointer_conversion():
    assert sprintf("%p", None) == "0x0"
    out = sprintf("%p", 0x7FFDEADBEEF)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0x7FFDEADBEEF


def test_mixed_conversions_concatenate():
    parts = ("left", "right")
    assert sprintf("%s|%s", *parts) == parts[0] + "|" + parts[1]


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_extra_arguments_ignored():
    assert sprintf("%s", "one", "two") == "one"


def test_format_stops_at_nul():
    assert sprintf("ab\0%d", 5) == "ab"


def test_bad_char_argument_raises():
    with pytest.raises(ValueError):
        sprintf("%c", "too long")


def test_invalid_base_error_not_raised_for_standard_hex():
    try:
        result = sprintf("%x", 16)
    except InvalidBaseError:
        pytest.fail("standard hex digits must be accepted")
    assert int(result, 16) == 16