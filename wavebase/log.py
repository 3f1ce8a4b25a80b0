"""Levelled console logging with an optional system-log channel."""

from __future__ import annotations

import enum
import logging
import os
import re
import sys
from typing import Sequence, TextIO

ENV_VARIABLE = "WAVEBASE_ENABLE_LOGGING"

_syslog = logging.getLogger("wavebase")
_ATOI = re.compile(r"\s*([+-]?\d+)")


class LogLevel(enum.IntEnum):
    """Message priorities, most severe first, plus the system-log channel."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7
    SYSLOG = 40


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def syslog_enabled_from_env(value: str | None) -> bool:
    """Decide from an environment value whether system logging is on.

    Unset means off; an empty value, ``true`` in any case, or a non-zero
    leading integer means on.
    """
    if value is None:
        return False
    if not value:
        return True
    return value.lower() == "true" or _atoi(value) != 0


class Logger:
    """Writes messages to a stream or, on the system-log level, to syslog.

    When ``enabled`` is ``None`` the system-log channel is switched on or
    off from the environment on first use, and again after :meth:`close`.
    """

    def __init__(self, stream: TextIO | None = None,
                 enabled: bool | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._configured = enabled
        self._enabled: bool | None = enabled

    @property
    def syslog_enabled(self) -> bool:
        """Whether system-log messages are forwarded."""
        if self._enabled is None:
            self._enabled = syslog_enabled_from_env(os.environ.get(ENV_VARIABLE))
        return self._enabled

    def log(self, level: int, message: str, ident: int = 0,
            ident_names: Sequence[str] = (),
            current_level: int = LogLevel.DEBUG) -> bool:
        """Emit ``message`` if ``level`` passes; return whether it was emitted.

        A non-zero ``ident`` prefixes the message with ``ident_names[ident]``.
        """
        if ident < 0:
            raise ValueError("ident must not be negative")
        if self.syslog_enabled and level == LogLevel.SYSLOG:
            _syslog.info("%s", message)
            return True
        if LogLevel.EMERG <= level <= LogLevel.DEBUG and level <= current_level:
            if ident:
                self.stream.write(f"{ident_names[ident]:>16} | {message}\n")
            else:
                self.stream.write(f"{message}\n")
            return True
        return False

    def close(self) -> None:
        """Close the system-log channel; it is set up again on next use."""
        self._enabled = self._configured


def format_vector(vec: Sequence[float]) -> str:
    """Format the first four elements of a vector as one line."""
    return " ".join(f"{v: 7.6f}" for v in vec[:4]) + "\n"


def format_row(mtx: Sequence[Sequence[float]], row: int, end: str = "\n") -> str:
    """Format row ``row`` of a column-major 4x4 matrix, followed by ``end``."""
    return " ".join(f"{column[row]: 6.3f}" for column in mtx[:4]) + end


def format_matrix(mtx: Sequence[Sequence[float]]) -> str:
    """Format a column-major 4x4 matrix as four lines."""
    return "".join(format_row(mtx, r, "\n") for r in range(4))


def format_matrices(m1: Sequence[Sequence[float]],
                    m2: Sequence[Sequence[float]]) -> str:
    """Format two 4x4 matrices side by side, separated by a tab."""
    return "".join(
        format_row(m1, r, "\t") + format_row(m2, r, "\n") for r in range(4)
    )