"""Tests for the OnceInMs throttle."""

from utils import OnceInMs


def test_first_call_executes():
    timer = OnceInMs(1000)
    assert timer.should_execute(10.0)


def test_throttles_until_interval_passes():
    timer = OnceInMs(500)
    assert timer.should_execute(0.0)
    assert not timer.should_execute(0.25)
    assert not timer.should_execute(0.49)
    assert timer.should_execute(0.5)
    assert not timer.should_execute(0.9)


def test_reset():
    timer = OnceInMs(5000)
    timer.should_execute(1.0)
    timer.reset()
    assert timer.should_execute(1.1)
