import io

import pytest

from yftfont.cformat import FormatError, cformat, cprintf


def test_plain_text_passes_through():
    assert cformat("main in\n") == "main in\n"


def test_percent_escape():
    assert cformat("100%%") == "100%"


def test_unknown_conversion_is_echoed_without_consuming():
    assert cformat("%q%d", 7) == "%q7"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        cformat("oops %")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        cformat("%d and %d", 1)


def test_none_format_raises():
    with pytest.raises(FormatError):
        cformat(None)


def test_null_string():
    assert cformat("%s", None) == "(null)"


def test_string_conversion():
    assert cformat("[%s]", "yft") == "[yft]"


def test_char_from_int_and_str():
    assert cformat("%c%c", ord("A"), "b") == "Ab"


def test_char_rejects_long_string():
    with pytest.raises(FormatError):
        cformat("%c", "ab")


@pytest.mark.parametrize("value", [0, 1, -1, 42, 2147483647, -2147483648, 123456])
def test_decimal_round_trip(value):
    assert int(cformat("%d", value)) == value
    assert cformat("%i", value) == cformat("%d", value)


def test_decimal_wraps_to_int32():
    assert cformat("%d", 2147483648) == "-2147483648"


def test_unsigned_of_minus_one():
    assert cformat("%u", -1) == "4294967295"


@pytest.mark.parametrize("value", [0, 9, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(value):
    assert int(cformat("%x", value), 16) == value
    assert cformat("%X", value) == cformat("%x", value).upper()


def test_hex_truncates_to_32_bits():
    assert int(cformat("%x", 2**32 + 5), 16) == 5


def test_pointer_null():
    assert cformat("%p", None) == "(nil)"
    assert cformat("%p", 0) == "(nil)"


def test_pointer_hex():
    assert cformat("%p", 255) == "0xff"


@pytest.mark.parametrize("value", [3, 4096, 0xDEADBEEF])
def test_pointer_round_trip(value):
    out = cformat("%p", value)
    assert out.startswith("0x")
    assert int(out, 16) == value


def test_float_fixed_example():
    assert cformat("%f", 1.5) == "1.500000"


@pytest.mark.parametrize("value", [0.0, 0.1, 2.25, -3.75, 1234.5678, -0.5])
def test_float_has_six_decimals_and_round_trips(value):
    out = cformat("%f", value)
    assert len(out.split(".")[1]) == 6
    assert abs(float(out) - value) < 1e-5
    assert out.startswith("-") == (value < 0)


@pytest.mark.parametrize("value", [3e9, -3e9, float("inf"), float("nan")])
def test_float_out_of_range_is_null(value):
    assert cformat("%f", value) == "null"


def test_bounded_string():
    assert cformat("%z|", "hello", 3) == "hel|"
    assert cformat("%z", "hi", 10) == "hi"


def test_cprintf_writes_and_counts():
    buffer = io.StringIO()
    count = cprintf("%s=%d%%", "n", 12, file=buffer)
    assert buffer.getvalue() == "n=12%"
    assert count == len(buffer.getvalue())


def test_cprintf_writes_nothing_on_error():
    buffer = io.StringIO()
    with pytest.raises(FormatError):
        cprintf("abc %", file=buffer)
    assert buffer.getvalue() == ""


def test_cprintf_defaults_to_stdout(capsys):
    count = cprintf("got %s\n", "fonts")
    assert capsys.readouterr().out == "got fonts\n"
    assert count == len("got fonts\n")