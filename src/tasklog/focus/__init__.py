"""Live countdown runtime: clock and watcher threads driven by a coordinator."""

from .channel import Channel, ChannelClosed
from .clock import CountdownClock
from .coordinator import CoordinatorResult, CoordinatorState, SessionCoordinator
from .terminal import KeyPress, Resize, Terminal, TerminalInput
from .ui import Frame, FrameLine, ViewState, render_frame
from .watcher import InputWatcher, QuitEvent, ResizeEvent

__all__ = [
    "Channel",
    "ChannelClosed",
    "CoordinatorResult",
    "CoordinatorState",
    "CountdownClock",
    "Frame",
    "FrameLine",
    "InputWatcher",
    "KeyPress",
    "QuitEvent",
    "Resize",
    "ResizeEvent",
    "SessionCoordinator",
    "Terminal",
    "TerminalInput",
    "ViewState",
    "render_frame",
]
