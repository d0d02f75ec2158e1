import pytest

from pushswap.printf import format_printf, printf


def test_plain_text_unchanged():
    text = "pb\nra\nrra\n"
    assert format_printf(text) == text


def test_percent_literal():
    assert format_printf("%%") == "%"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_argument():
    assert format_printf("[%s]", "sa") == "[sa]"


def test_null_pointer():
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_hex():
    out = format_printf("%p", 255)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 255


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -15, 123456, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


@pytest.mark.parametrize("n", [0, 1, 10, 255, 48879, 2**32 - 1])
def test_hex_matches_builtin(n):
    assert format_printf("%x", n) == format(n, "x")
    assert format_printf("%X", n) == format(n, "X")


def test_unsigned_wraps_like_hex():
    assert int(format_printf("%u", -1)) == int(format_printf("%x", -1), 16)


def test_char_from_code():
    assert format_printf("%c", 65) == "A"


def test_unknown_conversion_consumes_nothing():
    assert format_printf("a%qb%s", "rr") == "abrr"


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s-%d\n", "pa", 3)
    captured = capsys.readouterr().out
    assert captured == format_printf("%s-%d\n", "pa", 3)
    assert count == len(captured)