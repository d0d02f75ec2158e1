"""Byte-buffer helpers working on ``bytearray`` and other byte sequences."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):  # type: ignore[arg-type]
            raise ValueError("byte count exceeds buffer length")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both buffers are required")
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The two regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buf[src:], buf[dest:])
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def memchr(buf: bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or ``None``."""
    _check_length(n, buf)
    target = c & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    if n <= 0:
        return 0
    _check_length(n, s1, s2)
    for x, y in zip(s1[:n], s2[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Raises :class:`MemoryError` when the size does not fit in the address space.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise MemoryError("requested size overflows")
    return bytearray(nmemb * size)