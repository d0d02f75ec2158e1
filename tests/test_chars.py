import string

import pytest

from pushswap.util.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


def test_isalpha_letters():
    assert all(isalpha(ch) for ch in string.ascii_letters)


def test_isalpha_rejects_others():
    assert not any(isalpha(ch) for ch in string.digits + string.punctuation + " ")
    assert isalpha("\u00e9") is False


def test_isdigit():
    assert all(isdigit(ch) for ch in string.digits)
    assert not any(isdigit(ch) for ch in string.ascii_letters + "+- ")
    assert isdigit(48) is True
    assert isdigit(57) is True
    assert isdigit(0) is False


def test_isalnum():
    assert all(isalnum(ch) for ch in string.ascii_letters + string.digits)
    assert not any(isalnum(ch) for ch in string.punctuation + string.whitespace)


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(-1) is False
    assert isascii(128) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint(32) is True
    assert isprint(126) is True
    assert isprint(127) is False
    assert isprint("\n") is False


def test_toupper_ints():
    assert toupper(97) == 65
    assert toupper(65) == 65


def test_tolower_ints():
    assert tolower(65) == 97
    assert tolower(122) == 122


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        upper = toupper(ch)
        assert isalpha(upper)
        assert upper != ch
        assert tolower(upper) == ch


def test_case_mapping_leaves_non_letters():
    for ch in string.digits + string.punctuation + " ":
        assert toupper(ch) == ch
        assert tolower(ch) == ch


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        isalpha("ab")