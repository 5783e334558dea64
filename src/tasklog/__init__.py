"""tasklog - a terminal task tracker with a live pomodoro countdown."""

__version__ = "0.3.0"
