"""Input/resize watcher worker."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol

from tasklog.errors import TerminalError
from tasklog.utils.logger import get_logger

from .channel import Channel
from .terminal import KeyPress, Resize

logger = get_logger("focus.watcher")

CTRL_C = "\x03"


@dataclass(frozen=True)
class QuitEvent:
    """The user asked to stop, or the terminal could not be read."""

    key: str | None = None
    error: TerminalError | None = None


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


WatcherEvent = QuitEvent | ResizeEvent


class InputSource(Protocol):
    def poll(self, timeout: float) -> KeyPress | Resize | None: ...


class InputWatcher(threading.Thread):
    """Turns keystrokes and size changes into watcher events.

    Sends one QuitEvent and stops on a quit key or a read error; sends a
    ResizeEvent per size change and keeps polling.
    """

    def __init__(
        self,
        source: InputSource,
        output: Channel[WatcherEvent],
        stop: threading.Event,
        quit_keys: str = "q",
        poll_seconds: float = 0.2,
    ):
        super().__init__(name="input-watcher", daemon=True)
        self.source = source
        self.output = output
        self.stop_event = stop
        self.quit_keys = frozenset(quit_keys) | {CTRL_C}
        self.poll_seconds = poll_seconds

    def _next_event(self) -> WatcherEvent | None:
        try:
            polled = self.source.poll(self.poll_seconds)
        except TerminalError as e:
            logger.error("terminal read failed: %s", e)
            return QuitEvent(error=e)

        if isinstance(polled, Resize):
            return ResizeEvent(polled.width, polled.height)
        if isinstance(polled, KeyPress) and polled.key in self.quit_keys:
            return QuitEvent(key=polled.key)
        return None

    def run(self) -> None:
        try:
            while not self.stop_event.is_set():
                event = self._next_event()
                if event is None:
                    continue

                if not self.output.send(event):
                    logger.debug("watcher receiver gone, exiting")
                    return

                if isinstance(event, QuitEvent):
                    logger.debug("watcher sent quit")
                    return
            logger.debug("watcher stopped")
        finally:
            self.output.close()
