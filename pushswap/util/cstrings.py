"""Text helpers with NUL-terminated string semantics.

Read-only helpers accept ``str`` or ``bytes``-like values and treat the first
NUL character as the end of the text. Positions are returned as indices
instead of pointers, with ``None`` standing for "not found". The copying
helpers write into a ``bytearray`` buffer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Union

Text = Union[str, bytes, bytearray]
Char = Union[str, int, bytes]

_LONG_MAX = 2**63 - 1
_SPACES = frozenset("\t\n\v\f\r ")


def _nul(s: Text) -> Text:
    return "\0" if isinstance(s, str) else b"\0"


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    end = s.find(_nul(s))  # type: ignore[arg-type]
    return len(s) if end < 0 else end


def _content(s: Text) -> Text:
    return s[: strlen(s)]


def _units(s: Text) -> list[int]:
    if isinstance(s, str):
        return [ord(ch) for ch in _content(s)]
    return list(_content(s))


def _byte_source(src: Union[bytes, bytearray]) -> bytes:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like")
    return bytes(_content(src))


def _needle(s: Text, c: Char) -> Text:
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError("expected a single character")
        code = c[0]
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        code = ord(c)
    else:
        code = c & 0xFF
    if isinstance(s, str):
        return chr(code)
    return bytes([code & 0xFF])


def strlcpy(dst: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dst`` and terminate it.

    Returns the length of ``src``. Nothing is written when ``size`` is 0.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError("size exceeds destination buffer")
    data = _byte_source(src)
    if size > 0:
        part = data[: size - 1]
        dst[: len(part)] = part
        dst[len(part)] = 0
    return len(data)


def strlcat(dst: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Append ``src`` to the text in ``dst`` so the result fits in ``size`` bytes.

    Returns the length of the text it tried to create. When ``size`` does not
    exceed the current length of ``dst``, nothing is written and
    ``len(src) + size`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    data = _byte_source(src)
    dst_len = strlen(dst)
    if size <= dst_len:
        return len(data) + size
    if size > len(dst):
        raise ValueError("size exceeds destination buffer")
    part = data[: size - 1 - dst_len]
    dst[dst_len : dst_len + len(part)] = part
    dst[dst_len + len(part)] = 0
    return len(data) + dst_len


def strchr(s: Text, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    needle = _needle(s, c)
    text = _content(s)
    if needle == _nul(s):
        return len(text)
    found = text.find(needle)  # type: ignore[arg-type]
    return None if found < 0 else found


def strrchr(s: Text, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    needle = _needle(s, c)
    text = _content(s)
    if needle == _nul(s):
        return len(text)
    found = text.rfind(needle)  # type: ignore[arg-type]
    return None if found < 0 else found


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either text.

    Returns the difference of the first pair of characters that differ, or 0.
    """
    if n <= 0:
        return 0
    a = _units(s1) + [0]
    b = _units(s2) + [0]
    for x, y in zip(a[:n], b[:n]):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Return where ``little`` first occurs wholly within ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    pattern = _content(little)
    if not pattern:
        return 0
    text = _content(big)[: max(length, 0)]
    found = text.find(pattern)  # type: ignore[arg-type]
    return None if found < 0 else found


def strdup(s: Text) -> Text:
    """Return a new copy of ``s`` up to its first NUL."""
    if isinstance(s, bytearray):
        return bytearray(_content(s))
    return _content(s)


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 2**32 if n >= 2**31 else n


def atoi(text: Text) -> int:
    """Convert the leading integer of ``text``, C style.

    Leading whitespace and one sign are accepted and parsing stops at the
    first non-digit. A value that overflows a 64-bit long gives -1; otherwise
    the result wraps to a signed 32-bit integer.
    """
    chars = text if isinstance(text, str) else _content(text).decode("latin-1")
    chars = chars[: strlen(chars)]
    pos = 0
    while pos < len(chars) and chars[pos] in _SPACES:
        pos += 1
    negative = False
    if pos < len(chars) and chars[pos] in "+-":
        negative = chars[pos] == "-"
        pos += 1
    value = 0
    while pos < len(chars) and "0" <= chars[pos] <= "9":
        digit = ord(chars[pos]) - ord("0")
        if value > (_LONG_MAX - digit) // 10:
            return -1
        value = value * 10 + digit
        pos += 1
    return _to_int32(-value if negative else value)


def _as_sequence(values: Sequence[int]) -> list[int]:
    return list(values)