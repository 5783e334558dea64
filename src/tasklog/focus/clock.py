"""Countdown clock worker."""

from __future__ import annotations

import threading

from tasklog.utils.logger import get_logger

from .channel import Channel

logger = get_logger("focus.clock")


class CountdownClock(threading.Thread):
    """Counts a duration down to zero, reporting remaining whole seconds.

    Each one-second tick is split into ``slices`` waits on the stop event so
    a stop request is seen within one slice. The clock reports after every
    decrement and exits on its own after reporting zero.
    """

    def __init__(
        self,
        duration_seconds: int,
        output: Channel[int],
        stop: threading.Event,
        tick_seconds: float = 1.0,
        slices: int = 10,
    ):
        super().__init__(name="countdown-clock", daemon=True)
        if duration_seconds < 0:
            raise ValueError("duration_seconds cannot be negative")
        self.remaining = duration_seconds
        self.output = output
        self.stop_event = stop
        self.slice_seconds = tick_seconds / slices
        self.slices = slices

    def _wait_one_tick(self) -> bool:
        """Wait out one tick; False when a stop was requested."""
        for _ in range(self.slices):
            if self.stop_event.is_set():
                return False
            if self.stop_event.wait(self.slice_seconds):
                return False
        return True

    def run(self) -> None:
        try:
            while True:
                if not self._wait_one_tick():
                    logger.debug("clock stopped with %ds left", self.remaining)
                    return

                self.remaining = max(0, self.remaining - 1)
                if not self.output.send(self.remaining):
                    logger.debug("clock receiver gone, exiting")
                    return

                if self.remaining == 0:
                    logger.debug("clock reached zero")
                    return
        finally:
            self.output.close()
