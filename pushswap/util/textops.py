"""String building helpers: substrings, joining, splitting, trimming, mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Union

from pushswap.util.cstrings import strlen

Text = Union[str, bytes, bytearray]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _require(*values: object) -> None:
    if any(value is None for value in values):
        raise TypeError("argument must not be None")


def _content(s: Text) -> Text:
    return s[: strlen(s)]


def _separator(s: Text, c: Union[str, int, bytes]) -> Text:
    if isinstance(c, int):
        return chr(c) if isinstance(s, str) else bytes([c & 0xFF])
    if len(c) != 1:
        raise ValueError("expected a single character")
    if isinstance(s, str):
        return c if isinstance(c, str) else chr(c[0])
    return c.encode("latin-1") if isinstance(c, str) else bytes(c)


def substr(s: Text, start: int, length: int) -> Text:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of the text gives an empty result.
    """
    _require(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _content(s)
    if start >= len(text):
        return text[:0]
    return text[start : start + length]


def strjoin(s1: Text, s2: Text) -> Text:
    """Return ``s1`` followed by ``s2``."""
    _require(s1, s2)
    return _content(s1) + _content(s2)


def split(s: Text, c: Union[str, int, bytes]) -> list[Text]:
    """Split ``s`` on every ``c``, leaving out empty words."""
    _require(s, c)
    text = _content(s)
    sep = _separator(text, c)
    return [word for word in text.split(sep) if word]  # type: ignore[arg-type]


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError("value does not fit in a 32-bit int")
    return str(n)


def strtrim(s: Text, charset: Text) -> Text:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    _require(s, charset)
    text = _content(s)
    chars = _content(charset)
    if not chars:
        return text
    return text.strip(chars)  # type: ignore[arg-type]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character of ``s``."""
    _require(s, func)
    return "".join(func(i, ch) for i, ch in enumerate(_content(s)))


def striteri(
    buf: Union[bytearray, MutableSequence[str]],
    func: Callable[[int, object], object],
) -> None:
    """Replace, in place, each element of ``buf`` with ``func(index, element)``.

    A ``bytearray`` is processed up to its first NUL byte.
    """
    _require(buf, func)
    end = strlen(buf) if isinstance(buf, bytearray) else len(buf)
    for i in range(end):
        buf[i] = func(i, buf[i])  # type: ignore[assignment]