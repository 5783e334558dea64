"""Console utilities for tasklog."""

from functools import lru_cache

from rich.console import Console

from tasklog.config import get_config_manager


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    color = get_config_manager().config.output.color
    return Console(highlight=highlight, no_color=not color)
