"""Small, fast pseudo-random generators of the xorshift family."""

from __future__ import annotations

import os
import struct
from typing import Iterator

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT64_MAX = 0x7FFFFFFFFFFFFFFF
_STAR_MULTIPLIER = 0x2545F4914F6CDD1D


def _rotl64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _check_u64(name: str, value: int) -> int:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer")
    return value


class Generator128:
    """128-bit state shared by xorshift128+, xoroshiro128+ and xoshiro128+.

    The state is two 64-bit words; xoshiro128+ works on the same state seen
    as four 32-bit words, low word first.
    """

    def __init__(self, s0: int, s1: int) -> None:
        _check_u64("s0", s0)
        _check_u64("s1", s1)
        if s0 == 0 and s1 == 0:
            raise ValueError("the state must not be all zero")
        self._s0 = s0
        self._s1 = s1

    @classmethod
    def from_entropy(cls) -> "Generator128":
        """Create a generator seeded from the operating system."""
        while True:
            s0, s1 = struct.unpack("<QQ", os.urandom(16))
            if s0 or s1:
                return cls(s0, s1)

    @property
    def state(self) -> tuple[int, int]:
        """The two 64-bit state words."""
        return self._s0, self._s1

    def xorshift128plus(self) -> int:
        """Advance with xorshift128+ and return a 64-bit value."""
        x = self._s0
        y = self._s1
        self._s0 = y
        x ^= (x << 23) & _MASK64
        self._s1 = x ^ y ^ (x >> 17) ^ (y >> 26)
        return (self._s1 + y) & _MASK64

    def xoroshiro128plus(self) -> int:
        """Advance with xoroshiro128+ and return a 64-bit value."""
        s0 = self._s0
        s1 = self._s1
        result = (s0 + s1) & _MASK64
        s1 ^= s0
        self._s0 = _rotl64(s0, 24) ^ s1 ^ ((s1 << 16) & _MASK64)
        self._s1 = _rotl64(s1, 37)
        return result

    def xoshiro128plus(self) -> int:
        """Advance with xoshiro128+ over the 32-bit words; return 32 bits."""
        w0 = self._s0 & _MASK32
        w1 = self._s0 >> 32
        w2 = self._s1 & _MASK32
        w3 = self._s1 >> 32

        result = (w0 + w3) & _MASK32
        t = (w1 << 9) & _MASK32

        w2 ^= w0
        w3 ^= w1
        w1 ^= w2
        w0 ^= w3
        w2 ^= t
        # The final step widens the word to 64 bits before rotating, so the
        # bits rotated back in are always zero: it is a plain shift.
        w3 = (w3 << 11) & _MASK32

        self._s0 = w0 | (w1 << 32)
        self._s1 = w2 | (w3 << 32)
        return result

    def sample(self) -> float:
        """Return a single-precision value in [-1.0, 1.0]."""
        value = self.xoroshiro128plus()
        if value > _INT64_MAX:
            value -= 1 << 64
        return _to_float32(value / _INT64_MAX)

    def uniform(self) -> float:
        """Return a value in [0.0, 1.0]."""
        return self.xoroshiro128plus() / _MASK64


class XorShift64Star:
    """The xorshift64* generator with a 64-bit state."""

    def __init__(self, seed: int) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, value: int) -> None:
        """Restart the sequence from ``value``, which must be non-zero."""
        _check_u64("seed", value)
        if value == 0:
            raise ValueError("the seed must be non-zero")
        self._state = value

    @property
    def state(self) -> int:
        """The current 64-bit state."""
        return self._state

    def next(self) -> int:
        """Advance the state and return a 64-bit value."""
        x = self._state
        x ^= x >> 12
        x ^= (x << 25) & _MASK64
        x ^= x >> 27
        self._state = x
        return (x * _STAR_MULTIPLIER) & _MASK64

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()