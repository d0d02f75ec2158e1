import pytest

from pushswap.parsing import InputError, parse_arguments, parse_int


@pytest.mark.parametrize("n", [0, 7, 42, -7, 2**31 - 1, -(2**31)])
def test_parse_int_round_trip(n):
    assert parse_int(str(n)) == n


def test_parse_int_accepts_plus_sign():
    assert parse_int("+5") == 5


def test_parse_int_minus_zero():
    assert parse_int("-0") == 0


def test_parse_int_leading_zeros():
    assert parse_int("007") == 7


def test_parse_int_int_min_string():
    assert parse_int("-2147483648") == -(2**31)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc",
        "12a",
        " 1",
        "1 ",
        "\t3",
        "+",
        "-",
        "--1",
        "+-1",
        "1-",
        "1+2",
        "1.5",
        "2147483648",
        "-2147483649",
        "99999999999999999999",
        "\u0663",
    ],
)
def test_parse_int_rejects(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_input_error_message_and_type():
    with pytest.raises(ValueError) as info:
        parse_int("x")
    assert str(info.value) == "Error"
    assert isinstance(info.value, InputError)


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


@pytest.mark.parametrize("args", [["1", "1"], ["+1", "1"], ["-0", "0", "5"]])
def test_parse_arguments_rejects_duplicates(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_parse_arguments_rejects_bad_number():
    with pytest.raises(InputError):
        parse_arguments(["1", "two", "3"])