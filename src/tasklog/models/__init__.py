"""tasklog domain models.

Pydantic models for the task and session entities plus the enumerations and
their stored integer codes.
"""

from .core import (
    DEFAULT_DAYS,
    DEFAULT_LIMIT,
    MAX_DAYS,
    MAX_LIMIT,
    Session,
    SessionCreate,
    SessionFilters,
    Task,
    TaskCreate,
    TaskFilters,
)
from .enums import (
    PRIORITY_CODES,
    SESSION_KIND_CODES,
    SESSION_STATUS_CODES,
    TASK_STATUS_CODES,
    IntCodes,
    Priority,
    SessionKind,
    SessionStatus,
    TaskStatus,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskFilters",
    # Session models
    "Session",
    "SessionCreate",
    "SessionFilters",
    # Enums
    "Priority",
    "TaskStatus",
    "SessionKind",
    "SessionStatus",
    # Stored codes
    "IntCodes",
    "PRIORITY_CODES",
    "TASK_STATUS_CODES",
    "SESSION_KIND_CODES",
    "SESSION_STATUS_CODES",
    # Limits
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "DEFAULT_DAYS",
    "MAX_DAYS",
]
