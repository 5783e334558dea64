"""Error taxonomy for tasklog.

Every error carries the process exit code the CLI should use when it surfaces
the error to the user.
"""

from __future__ import annotations

from tasklog.utils.exit_codes import (
    ERROR_CONFLICT,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
    ERROR_TERMINAL,
)


class TasklogError(Exception):
    """Base application error with exit code."""

    exit_code: int = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ValidationError(TasklogError):
    """Bad user input, raised before any side effect."""

    exit_code = ERROR_INVALID_ARGS


class NotFoundError(TasklogError):
    """Referenced task or session id does not exist."""

    exit_code = ERROR_NOT_FOUND


class AlreadyDoneError(TasklogError):
    """Task is already marked as done."""

    exit_code = ERROR_CONFLICT


class PersistenceError(TasklogError):
    """Storage I/O or constraint failure."""

    exit_code = ERROR_STORAGE


class TerminalError(TasklogError):
    """Raw mode, alternate screen or draw failure."""

    exit_code = ERROR_TERMINAL
