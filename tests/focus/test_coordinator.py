"""Tests for the session coordinator state machine.

Real clock and watcher threads run against a fake terminal with shortened
tick and poll intervals; a few cases swap in fake workers to pin down the
order in which channels are drained.
"""

from __future__ import annotations

import threading
import time

import pytest

from tasklog.config import PomodoroConfig
from tasklog.errors import TerminalError
from tasklog.focus import (
    CoordinatorState,
    KeyPress,
    QuitEvent,
    Resize,
    SessionCoordinator,
)
from tasklog.models import SessionStatus

from focus_fakes import FakeTerminal, FakeWorker


def _workers_alive() -> list[str]:
    return [
        t.name
        for t in threading.enumerate()
        if t.name in ("countdown-clock", "input-watcher") and t.is_alive()
    ]


def _frame_text(frame) -> str:
    return "\n".join(line.text for line in frame.lines)


# ---------------------------------------------------------------------------
# Real workers
# ---------------------------------------------------------------------------


class TestFinish:
    def test_three_second_session_finishes(self, fast_settings):
        terminal = FakeTerminal()
        coordinator = SessionCoordinator("focus", 3, terminal, fast_settings)

        result = coordinator.run()

        assert result.status is SessionStatus.FINISHED
        assert result.remaining == 0
        assert result.error is None
        assert coordinator.state is CoordinatorState.DONE
        assert terminal.log == ["acquire", "release"]
        assert "00:00" in _frame_text(terminal.frames[-1])
        assert "00:03" in _frame_text(terminal.frames[0])
        assert _workers_alive() == []


class TestQuit:
    def test_immediate_quit_pauses_and_joins_workers(self):
        settings = PomodoroConfig(poll_seconds=0.01, idle_seconds=0.005)
        terminal = FakeTerminal(script=[KeyPress("q")])
        coordinator = SessionCoordinator("focus", 60, terminal, settings)

        started = time.monotonic()
        result = coordinator.run()

        assert result.status is SessionStatus.PAUSED
        assert result.remaining >= 59
        assert result.error is None
        assert _workers_alive() == []
        assert time.monotonic() - started < 1.0
        assert terminal.log == ["acquire", "release"]

    def test_ctrl_c_pauses(self, fast_settings):
        terminal = FakeTerminal(script=[KeyPress("\x03")])
        result = SessionCoordinator("focus", 60, terminal, fast_settings).run()
        assert result.status is SessionStatus.PAUSED


class TestResize:
    def test_two_resizes_redraw_with_latest_size(self, fast_settings):
        terminal = FakeTerminal(size=(80, 24), script=[Resize(100, 30), Resize(120, 40)])
        coordinator = SessionCoordinator("focus", 3, terminal, fast_settings)

        result = coordinator.run()

        assert result.status is SessionStatus.FINISHED
        corners = [(f.x, f.y) for f in terminal.frames]
        assert (30, 13) in corners
        assert (40, 18) in corners
        assert corners.index((30, 13)) < corners.index((40, 18))
        assert corners[-1] == (40, 18)
        # initial draw, two resizes, three ticks
        assert coordinator.redraws == len(terminal.frames) == 6


class TestTerminalErrors:
    def test_draw_failure_pauses_and_restores(self, fast_settings):
        terminal = FakeTerminal(fail_draw_at=2)
        result = SessionCoordinator("focus", 30, terminal, fast_settings).run()

        assert result.status is SessionStatus.PAUSED
        assert isinstance(result.error, TerminalError)
        assert terminal.log == ["acquire", "release"]
        assert _workers_alive() == []

    def test_acquire_failure_pauses_without_workers(self, fast_settings):
        terminal = FakeTerminal(fail_acquire=True)
        started = []

        def clock_factory(*args):
            started.append("clock")
            raise AssertionError("clock must not be built")

        coordinator = SessionCoordinator(
            "focus", 30, terminal, fast_settings, clock_factory=clock_factory
        )
        result = coordinator.run()

        assert result.status is SessionStatus.PAUSED
        assert isinstance(result.error, TerminalError)
        assert started == []
        assert terminal.frames == []

    def test_read_error_pauses_with_error(self, fast_settings):
        terminal = FakeTerminal(script=[TerminalError("input closed")])
        result = SessionCoordinator("focus", 30, terminal, fast_settings).run()

        assert result.status is SessionStatus.PAUSED
        assert str(result.error) == "input closed"


# ---------------------------------------------------------------------------
# Fake workers
# ---------------------------------------------------------------------------


def _coordinator(terminal, clock_messages, watcher_messages, clock_close=True, watcher_close=True):
    workers = {}

    def clock_factory(duration, channel, stop):
        workers["clock"] = FakeWorker(channel, clock_messages, close=clock_close)
        return workers["clock"]

    def watcher_factory(term, channel, stop):
        workers["watcher"] = FakeWorker(channel, watcher_messages, close=watcher_close)
        return workers["watcher"]

    settings = PomodoroConfig(idle_seconds=0.001)
    coordinator = SessionCoordinator(
        "focus",
        3,
        terminal,
        settings,
        clock_factory=clock_factory,
        watcher_factory=watcher_factory,
    )
    return coordinator, workers


class TestDrainOrder:
    def test_watcher_is_drained_before_clock(self):
        terminal = FakeTerminal()
        coordinator, workers = _coordinator(
            terminal, clock_messages=[0], watcher_messages=[QuitEvent(key="q")]
        )

        result = coordinator.run()

        assert result.status is SessionStatus.PAUSED
        assert result.remaining == 3
        assert workers["clock"].joined and workers["watcher"].joined

    def test_clock_zero_finishes(self):
        terminal = FakeTerminal()
        coordinator, _ = _coordinator(
            terminal, clock_messages=[2, 1, 0], watcher_messages=[], watcher_close=False
        )
        result = coordinator.run()
        assert result.status is SessionStatus.FINISHED
        assert len(terminal.frames) == 4


class TestChannelClosed:
    def test_clock_closing_early_pauses(self):
        terminal = FakeTerminal()
        coordinator, _ = _coordinator(
            terminal, clock_messages=[2], watcher_messages=[], watcher_close=False
        )
        result = coordinator.run()
        assert result.status is SessionStatus.PAUSED
        assert result.remaining == 2

    def test_watcher_closing_without_quit_pauses(self):
        terminal = FakeTerminal()
        coordinator, _ = _coordinator(
            terminal, clock_messages=[], watcher_messages=[], clock_close=False
        )
        result = coordinator.run()
        assert result.status is SessionStatus.PAUSED


@pytest.mark.parametrize("status", [SessionStatus.FINISHED, SessionStatus.PAUSED])
def test_outcome_is_never_running(status, fast_settings):
    script = [KeyPress("q")] if status is SessionStatus.PAUSED else []
    terminal = FakeTerminal(script=script)
    result = SessionCoordinator("focus", 2, terminal, fast_settings).run()
    assert result.status is status
