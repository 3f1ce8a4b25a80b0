"""Sleeping helpers and a fixed-step repeating timer."""

from __future__ import annotations

import time

_STEP_US = 1000


def _check_unsigned(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def usec_sleep(dt_us: int) -> None:
    """Sleep for ``dt_us`` microseconds.

    Zero gives up the rest of the current time slice to other threads.
    """
    _check_unsigned("dt_us", dt_us)
    time.sleep(dt_us / 1_000_000)


def msec_sleep(dt_ms: int) -> None:
    """Sleep for ``dt_ms`` milliseconds.

    Zero gives up the rest of the current time slice to other threads.
    """
    _check_unsigned("dt_ms", dt_ms)
    time.sleep(dt_ms / 1000)


def _now_us() -> int:
    return time.monotonic_ns() // 1000


class RepeatTimer:
    """Paces a loop so that successive :meth:`wait` calls are a step apart."""

    def __init__(self) -> None:
        self._start_us: int | None = None
        self.step_us = 0

    def start_repeatable(self, us: int) -> None:
        """Start the timer.

        The step is fixed at one millisecond; the requested interval is
        checked but does not change it.
        """
        _check_unsigned("us", us)
        self.step_us = _STEP_US
        self._start_us = _now_us()

    def stop(self) -> bool:
        """Stop the timer; always succeeds."""
        return True

    def wait(self) -> int:
        """Sleep out what is left of the current step.

        Returns the number of microseconds slept, zero when the step has
        already passed or the timer was never started.
        """
        now = _now_us()
        start = self._start_us
        self._start_us = now
        if start is None:
            return 0
        remaining = self.step_us - (now - start)
        if remaining > 0:
            usec_sleep(remaining)
            return remaining
        return 0