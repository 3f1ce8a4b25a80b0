import io
import logging

import pytest

from wavebase.log import (
    ENV_VARIABLE,
    Logger,
    LogLevel,
    format_matrices,
    format_matrix,
    format_row,
    format_vector,
    syslog_enabled_from_env,
)

IDENTITY = [[1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]]


def test_levels_within_syslog_range_are_printed():
    stream = io.StringIO()
    logger = Logger(stream, False)
    assert logger.log(LogLevel.EMERG, "first", current_level=LogLevel.DEBUG) is True
    assert logger.log(LogLevel.DEBUG, "last", current_level=LogLevel.DEBUG) is True
    assert stream.getvalue() == "first\nlast\n"


@pytest.mark.parametrize(
    "value, expected",
    [(None, False), ("", True), ("true", True), ("TRUE", True),
     ("1", True), ("  7x", True), ("0", False), ("false", False), ("no", False)],
)
def test_syslog_enabled_from_env(value, expected):
    assert syslog_enabled_from_env(value) is expected


def test_plain_message():
    stream = io.StringIO()
    assert Logger(stream, False).log(LogLevel.INFO, "hello") is True
    assert stream.getvalue() == "hello\n"


def test_message_with_ident_is_right_aligned():
    stream = io.StringIO()
    Logger(stream, False).log(LogLevel.INFO, "hello", 1, ["", "mixer"])
    line = stream.getvalue()
    assert line == "mixer".rjust(16) + " | hello\n"


def test_level_above_current_is_dropped():
    stream = io.StringIO()
    logger = Logger(stream, False)
    assert logger.log(LogLevel.DEBUG, "x", current_level=LogLevel.INFO) is False
    assert stream.getvalue() == ""


def test_syslog_level_dropped_when_disabled():
    stream = io.StringIO()
    assert Logger(stream, False).log(LogLevel.SYSLOG, "x") is False
    assert stream.getvalue() == ""


def test_syslog_level_forwarded_when_enabled(caplog):
    caplog.set_level(logging.INFO, logger="wavebase")
    stream = io.StringIO()
    assert Logger(stream, True).log(LogLevel.SYSLOG, "to syslog") is True
    assert stream.getvalue() == ""
    assert [r.getMessage() for r in caplog.records] == ["to syslog"]


def test_enabled_read_from_environment(monkeypatch):
    monkeypatch.setenv(ENV_VARIABLE, "true")
    logger = Logger(io.StringIO())
    assert logger.syslog_enabled is True
    monkeypatch.setenv(ENV_VARIABLE, "0")
    assert logger.syslog_enabled is True
    logger.close()
    assert logger.syslog_enabled is False


def test_negative_ident_rejected():
    with pytest.raises(ValueError):
        Logger(io.StringIO(), False).log(LogLevel.INFO, "x", -1)


def test_format_vector():
    assert format_vector([1.0, -2.0, 0.5, 0.0]) == (
        " 1.000000 -2.000000  0.500000  0.000000\n"
    )


def test_format_row_uses_column_elements():
    mtx = [[1.0, 2.0, 3.0, 4.0], [5.0, 6.0, 7.0, 8.0],
           [9.0, 10.0, 11.0, 12.0], [13.0, 14.0, 15.0, 16.0]]
    assert format_row(mtx, 1, "\t") == " 2.000  6.000  10.000  14.000\t"


def test_format_matrix_identity():
    lines = format_matrix(IDENTITY).splitlines()
    assert len(lines) == 4
    assert lines[0] == " 1.000  0.000  0.000  0.000"
    assert all(line.split()[i] == "1.000" for i, line in enumerate(lines))


def test_format_matrices_side_by_side():
    text = format_matrices(IDENTITY, IDENTITY)
    lines = text.splitlines()
    assert len(lines) == 4
    for line in lines:
        left, right = line.split("\t")
        assert left == right