"""Session coordinator: the control loop behind a live countdown.

The coordinator owns the terminal and the view state. The clock and the
watcher run on their own threads and only talk to it through one channel
each; the coordinator only talks back through their stop events.
"""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from tasklog.config import PomodoroConfig
from tasklog.errors import TerminalError
from tasklog.models import SessionStatus
from tasklog.utils.logger import get_logger

from .channel import Channel, ChannelClosed
from .clock import CountdownClock
from .terminal import Terminal
from .ui import ViewState, render_frame
from .watcher import InputWatcher, QuitEvent, ResizeEvent, WatcherEvent

logger = get_logger("focus.coordinator")


class CoordinatorState(Enum):
    ACTIVE = "active"
    TERMINATING = "terminating"
    DONE = "done"


@dataclass
class CoordinatorResult:
    """Outcome of one countdown.

    ``status`` is Finished or Paused. ``error`` holds the terminal error
    that forced a Paused outcome, if any.
    """

    status: SessionStatus
    remaining: int
    error: TerminalError | None = None


ClockFactory = Callable[[int, Channel[int], threading.Event], threading.Thread]
WatcherFactory = Callable[[Terminal, Channel[WatcherEvent], threading.Event], threading.Thread]


class SessionCoordinator:
    """Runs one countdown from terminal acquire to worker shutdown."""

    def __init__(
        self,
        title: str,
        duration_seconds: int,
        terminal: Terminal,
        settings: PomodoroConfig | None = None,
        clock_factory: ClockFactory | None = None,
        watcher_factory: WatcherFactory | None = None,
    ):
        self.terminal = terminal
        self.settings = settings or PomodoroConfig()
        self.duration_seconds = duration_seconds
        self.view = ViewState(title=title, width=0, height=0, remaining=duration_seconds)
        self.state = CoordinatorState.ACTIVE
        self.status = SessionStatus.RUNNING
        self.error: TerminalError | None = None
        self.redraws = 0
        self._clock_factory = clock_factory or self._default_clock
        self._watcher_factory = watcher_factory or self._default_watcher

    def _default_clock(self, duration: int, output: Channel[int], stop: threading.Event):
        return CountdownClock(
            duration,
            output,
            stop,
            tick_seconds=self.settings.tick_seconds,
            slices=self.settings.tick_slices,
        )

    def _default_watcher(
        self, terminal: Terminal, output: Channel[WatcherEvent], stop: threading.Event
    ):
        return InputWatcher(
            terminal.input(),
            output,
            stop,
            quit_keys=self.settings.quit_keys,
            poll_seconds=self.settings.poll_seconds,
        )

    def _terminate(self, status: SessionStatus, error: TerminalError | None = None):
        """Leave ACTIVE with *status*. Only the first outcome counts."""
        if self.state is CoordinatorState.ACTIVE:
            self.state = CoordinatorState.TERMINATING
            self.status = status
            self.view.quit = True
        if error is not None and self.error is None:
            self.error = error

    def _redraw(self) -> None:
        self.terminal.draw(render_frame(self.view))
        self.redraws += 1

    def _drain_watcher(self, channel: Channel[WatcherEvent]) -> bool:
        """Handle pending watcher events; True if anything arrived."""
        received = False
        while self.state is CoordinatorState.ACTIVE:
            try:
                event = channel.try_recv()
            except queue.Empty:
                break
            except ChannelClosed:
                logger.warning("watcher exited without a quit event")
                self._terminate(SessionStatus.PAUSED)
                return True

            received = True
            if isinstance(event, QuitEvent):
                logger.info("quit requested (%s)", event.key or "read error")
                self._terminate(SessionStatus.PAUSED, event.error)
            elif isinstance(event, ResizeEvent):
                self.view.width, self.view.height = event.width, event.height
                self._redraw()
        return received

    def _drain_clock(self, channel: Channel[int]) -> bool:
        """Handle pending clock ticks; True if anything arrived."""
        received = False
        while self.state is CoordinatorState.ACTIVE:
            try:
                remaining = channel.try_recv()
            except queue.Empty:
                break
            except ChannelClosed:
                if self.view.remaining == 0:
                    self._terminate(SessionStatus.FINISHED)
                else:
                    logger.warning(
                        "clock exited early with %ds left", self.view.remaining
                    )
                    self._terminate(SessionStatus.PAUSED)
                return True

            received = True
            self.view.remaining = remaining
            self._redraw()
            if remaining == 0:
                self._terminate(SessionStatus.FINISHED)
        return received

    def _loop(self) -> None:
        clock_channel: Channel[int] = Channel()
        watcher_channel: Channel[WatcherEvent] = Channel()
        clock_stop = threading.Event()
        watcher_stop = threading.Event()

        clock = self._clock_factory(self.duration_seconds, clock_channel, clock_stop)
        watcher = self._watcher_factory(self.terminal, watcher_channel, watcher_stop)

        watcher.start()
        clock.start()
        try:
            while self.state is CoordinatorState.ACTIVE:
                received = self._drain_watcher(watcher_channel)
                if self.state is CoordinatorState.ACTIVE:
                    received = self._drain_clock(clock_channel) or received
                if not received and self.state is CoordinatorState.ACTIVE:
                    time.sleep(self.settings.idle_seconds)
        except TerminalError as e:
            logger.error("countdown display failed: %s", e)
            self._terminate(SessionStatus.PAUSED, e)
        finally:
            self._terminate(SessionStatus.PAUSED)
            clock_stop.set()
            watcher_stop.set()
            clock_channel.detach()
            watcher_channel.detach()
            watcher.join()
            clock.join()
            logger.debug("workers joined")

    def run(self) -> CoordinatorResult:
        """Run the countdown until it finishes or the user quits.

        Blocks the calling thread. Terminal errors never escape; they end
        the countdown as Paused and are returned on the result.
        """
        logger.info("countdown started: %r for %ds", self.view.title, self.duration_seconds)
        try:
            with self.terminal.session():
                self.view.width, self.view.height = self.terminal.size()
                self._redraw()
                self._loop()
        except TerminalError as e:
            logger.error("terminal error: %s", e)
            self._terminate(SessionStatus.PAUSED, e)

        self.state = CoordinatorState.DONE
        logger.info(
            "countdown ended: %s with %ds left", self.status.value, self.view.remaining
        )
        return CoordinatorResult(
            status=self.status, remaining=self.view.remaining, error=self.error
        )
