"""Terminal access for the countdown screen.

``Terminal`` owns the screen (raw mode, alternate screen, cursor) and is
used only by the coordinator. ``TerminalInput`` reads keys and notices size
changes, and is used only by the watcher thread.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console
from rich.control import Control
from rich.text import Text

from tasklog.errors import TerminalError
from tasklog.utils.logger import get_logger

from .ui import Frame

logger = get_logger("focus.terminal")


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


def read_size(fd: int) -> tuple[int, int]:
    """Current (columns, lines) of the terminal behind *fd*."""
    try:
        size = os.get_terminal_size(fd)
    except OSError as e:
        raise TerminalError(f"Could not read terminal size: {e}") from e
    return size.columns, size.lines


class TerminalInput:
    """Non-blocking key reader with resize detection."""

    def __init__(self, fd: int, size: tuple[int, int]):
        self.fd = fd
        self._size = size

    def poll(self, timeout: float) -> KeyPress | Resize | None:
        """Wait up to *timeout* seconds for a key or a size change.

        Raises:
            TerminalError: If the terminal cannot be read
        """
        size = read_size(self.fd)
        if size != self._size:
            self._size = size
            return Resize(*size)

        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(self.fd, 1)
        except (OSError, ValueError) as e:
            raise TerminalError(f"Could not read from terminal: {e}") from e

        if not data:
            raise TerminalError("Terminal input closed")
        return KeyPress(data.decode("utf-8", errors="replace"))


class Terminal:
    """Exclusive owner of the terminal for the length of one session."""

    def __init__(self, console: Console | None = None, stdin: TextIO | None = None):
        self.console = console or Console(highlight=False)
        self.stdin = stdin or sys.stdin
        self._saved_mode: list | None = None

    @property
    def fd(self) -> int:
        return self.stdin.fileno()

    def size(self) -> tuple[int, int]:
        return read_size(self.fd)

    def input(self) -> TerminalInput:
        """A reader for the watcher thread, seeded with the current size."""
        return TerminalInput(self.fd, self.size())

    def acquire(self) -> None:
        """Enter raw mode, switch to the alternate screen and hide the cursor.

        Raises:
            TerminalError: If stdin is not a terminal or a mode change fails;
                whatever was already changed is undone first
        """
        if not self.stdin.isatty():
            raise TerminalError("A countdown needs an interactive terminal")

        try:
            self._saved_mode = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
        except termios.error as e:
            self._saved_mode = None
            raise TerminalError(f"Could not enter raw mode: {e}") from e

        try:
            self.console.set_alt_screen(True)
            self.console.show_cursor(False)
        except OSError as e:
            self.release()
            raise TerminalError(f"Could not switch screens: {e}") from e

        logger.debug("terminal acquired")

    def release(self) -> None:
        """Undo everything ``acquire`` did. Every step is attempted.

        Raises:
            TerminalError: If any step failed
        """
        failures: list[str] = []

        try:
            self.console.show_cursor(True)
            self.console.set_alt_screen(False)
        except OSError as e:
            failures.append(f"screen: {e}")

        if self._saved_mode is not None:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_mode)
            except termios.error as e:
                failures.append(f"mode: {e}")
            self._saved_mode = None

        if failures:
            logger.error("terminal restore incomplete: %s", "; ".join(failures))
            raise TerminalError("Could not restore terminal (" + "; ".join(failures) + ")")
        logger.debug("terminal released")

    @contextmanager
    def session(self) -> Iterator[Terminal]:
        """Hold the terminal for the duration of the block."""
        self.acquire()
        try:
            yield self
        finally:
            self.release()

    def draw(self, frame: Frame) -> None:
        """Repaint the whole screen with *frame*.

        Raises:
            TerminalError: If writing to the terminal fails
        """
        try:
            self.console.control(Control.clear(), Control.home())
            for offset, line in enumerate(frame.lines):
                self.console.control(Control.move_to(frame.x, frame.y + offset))
                self.console.print(
                    Text(line.text, style=line.style), end="", soft_wrap=True
                )
        except (OSError, ValueError) as e:
            raise TerminalError(f"Could not draw countdown: {e}") from e
