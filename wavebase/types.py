"""Byte swapping, case-insensitive search and small numeric helpers."""

from __future__ import annotations

from typing import TypeVar

GMATH_4PI = 12.56637061435917246399
GMATH_2PI = 6.28318530717958647692
GMATH_PI = 3.14159265358979323846
GMATH_PI_2 = 1.57079632679489661923

GMATH_DEG_TO_RAD_2 = 0.00872664625997164774
GMATH_DEG_TO_RAD = 0.01745329251994329547
GMATH_RAD_TO_DEG = 57.29577951308232286465
GMATH_RAD_TO_DEG2 = 114.59155902616464572930

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

T = TypeVar("T")


def bswap16(x: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    x &= _MASK16
    return ((x >> 8) | (x << 8)) & _MASK16


def bswap32h(x: int) -> int:
    """Swap the bytes inside each 16-bit half of a 32-bit value."""
    x &= _MASK32
    return ((x >> 8) & 0x00FF00FF) | ((x << 8) & 0xFF00FF00)


def bswap32w(x: int) -> int:
    """Swap the two 16-bit halves of a 32-bit value."""
    x &= _MASK32
    return ((x >> 16) | (x << 16)) & _MASK32


def bswap32(x: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return bswap32w(bswap32h(x))


def bswap64(x: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    x &= _MASK64
    x = ((x >> 8) & 0x00FF00FF00FF00FF) | ((x << 8) & 0xFF00FF00FF00FF00)
    x = ((x >> 16) & 0x0000FFFF0000FFFF) | ((x << 16) & 0xFFFF0000FFFF0000)
    return ((x >> 32) | (x << 32)) & _MASK64


def strcasestr(haystack: str, needle: str) -> str | None:
    """Find ``needle`` in ``haystack`` ignoring ASCII case.

    Returns the part of ``haystack`` starting at the first match, the whole
    ``haystack`` for an empty needle, or ``None`` when there is no match.
    """
    if not needle:
        return haystack
    index = haystack.translate(_ASCII_LOWER).find(needle.translate(_ASCII_LOWER))
    return None if index < 0 else haystack[index:]


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range ``low``..``high``; ``high`` wins on overlap."""
    if value > high:  # type: ignore[operator]
        return high
    if value < low:  # type: ignore[operator]
        return low
    return value


def strlcpy(src: str, size: int) -> str:
    """Return what a buffer of ``size`` characters holds after a bounded copy.

    One slot is kept for the terminator, so at most ``size - 1`` characters
    of ``src`` survive; text after an embedded NUL is dropped.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return ""
    text = src.split("\0", 1)[0]
    return text[: size - 1]