"""A small printf supporting ``%c %s %d %i %u %x %X %p %%``."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_LOWER = "0123456789abcdef"
_UPPER = "0123456789ABCDEF"
_DECIMAL = "0123456789"


def _digits(n: int, base: str) -> str:
    radix = len(base)
    out = []
    while n >= 1:
        n, rem = divmod(n, radix)
        out.append(base[rem])
    return "".join(reversed(out)) or "0"


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 2**32 if n >= 2**31 else n


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conv: str, args: Iterator[Any]) -> str:
    if conv == "%":
        return "%"
    if conv == "c":
        value = _next_arg(args)
        if isinstance(value, str):
            return value[:1] if value else "\0"
        return chr(int(value) & 0xFF)
    if conv == "s":
        value = _next_arg(args)
        return "(null)" if value is None else str(value)
    if conv in ("d", "i"):
        return str(_to_int32(int(_next_arg(args))))
    if conv == "p":
        value = int(_next_arg(args) or 0) & 0xFFFFFFFFFFFFFFFF
        return "(nil)" if value == 0 else "0x" + _digits(value, _LOWER)
    if conv in ("x", "X", "u"):
        value = int(_next_arg(args)) & 0xFFFFFFFF
        base = {"x": _LOWER, "X": _UPPER, "u": _DECIMAL}[conv]
        return _digits(value, base)
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write.

    An unknown conversion writes nothing and consumes no argument.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    remaining = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch == "%":
            conv = next(chars, "")
            out.append(_convert(conv, remaining))
        else:
            out.append(ch)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)