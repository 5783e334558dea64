"""Tests for the countdown clock thread."""

import threading
import time

import pytest

from tasklog.focus import Channel, CountdownClock

from focus_fakes import drain


def _clock(duration, channel, stop, tick=0.02):
    return CountdownClock(duration, channel, stop, tick_seconds=tick, slices=4)


def test_counts_down_to_zero_then_exits():
    channel, stop = Channel(), threading.Event()
    clock = _clock(3, channel, stop)
    clock.start()

    assert drain(channel) == [2, 1, 0]
    clock.join(timeout=1)
    assert not clock.is_alive()


def test_stop_before_first_tick_reports_nothing():
    channel, stop = Channel(), threading.Event()
    stop.set()
    clock = _clock(10, channel, stop)
    clock.start()

    assert drain(channel) == []
    clock.join(timeout=1)
    assert not clock.is_alive()


def test_stop_is_seen_within_one_slice():
    channel, stop = Channel(), threading.Event()
    clock = CountdownClock(60, channel, stop, tick_seconds=1.0, slices=10)
    clock.start()
    time.sleep(0.05)

    started = time.monotonic()
    stop.set()
    clock.join(timeout=1)
    assert not clock.is_alive()
    assert time.monotonic() - started < 0.5
    assert drain(channel) == []


def test_detached_receiver_ends_clock_quietly():
    channel, stop = Channel(), threading.Event()
    channel.detach()
    clock = _clock(5, channel, stop)
    clock.start()
    clock.join(timeout=1)

    assert not clock.is_alive()
    assert channel.closed


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        CountdownClock(-1, Channel(), threading.Event())
