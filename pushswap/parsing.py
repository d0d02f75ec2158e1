"""Reading push_swap's command-line numbers."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.util.chars import isdigit

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Parse a signed 32-bit integer written with one optional sign and digits only."""
    if any(not isdigit(ch) and ch not in "+-" for ch in text):
        raise InputError()
    negative = False
    digits = text
    if digits[:1] in ("+", "-"):
        negative = digits[0] == "-"
        digits = digits[1:]
    if not digits or not all(isdigit(ch) for ch in digits):
        raise InputError()
    value = 0
    for ch in digits:
        value = value * 10 + (ord(ch) - ord("0"))
        signed = -value if negative else value
        if not _INT_MIN <= signed <= _INT_MAX:
            raise InputError()
    return -value if negative else value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument; raise :class:`InputError` on a bad or repeated number."""
    values = [parse_int(arg) for arg in args]
    if len(set(values)) != len(values):
        raise InputError()
    return values