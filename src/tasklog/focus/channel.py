"""One-way reporting channel between a worker thread and the coordinator."""

from __future__ import annotations

import queue
import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class ChannelClosed(Exception):
    """The sending side finished and every message has been received."""


class Channel(Generic[T]):
    """Unbounded single-producer, single-consumer channel.

    ``send`` never blocks. It returns False once the receiver has detached,
    which the sender treats as an external shutdown. The sender calls
    ``close`` when it exits; the receiver then sees ``ChannelClosed`` after
    draining whatever was sent before.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[T] = queue.SimpleQueue()
        self._closed = threading.Event()
        self._detached = threading.Event()

    def send(self, item: T) -> bool:
        if self._detached.is_set() or self._closed.is_set():
            return False
        self._queue.put(item)
        return True

    def close(self) -> None:
        self._closed.set()

    def detach(self) -> None:
        self._detached.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def try_recv(self) -> T:
        """Return the next message without blocking.

        Raises:
            queue.Empty: Nothing pending and the sender is still running
            ChannelClosed: Nothing pending and the sender has closed
        """
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            if not self._closed.is_set():
                raise
        # Everything sent before close() is already queued
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            raise ChannelClosed() from None
