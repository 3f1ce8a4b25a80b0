import time

import pytest

from wavebase.timer import RepeatTimer, msec_sleep, usec_sleep


@pytest.mark.parametrize("func", [usec_sleep, msec_sleep])
def test_negative_sleep_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


def test_step_is_fixed_at_one_millisecond():
    timer = RepeatTimer()
    timer.start_repeatable(5000)
    assert timer.step_us == 1000


def test_start_rejects_negative_interval():
    timer = RepeatTimer()
    with pytest.raises(ValueError):
        timer.start_repeatable(-5)


def test_wait_right_after_start_sleeps_within_step():
    timer = RepeatTimer()
    timer.start_repeatable(1000)
    slept = timer.wait()
    assert 0 <= slept <= timer.step_us


def test_wait_after_step_passed_does_not_sleep():
    timer = RepeatTimer()
    timer.start_repeatable(1000)
    time.sleep(0.01)
    assert timer.wait() == 0


def test_wait_without_start_does_not_sleep():
    timer = RepeatTimer()
    assert timer.wait() == 0


def test_stop_succeeds():
    timer = RepeatTimer()
    timer.start_repeatable(1000)
    assert timer.stop() is True