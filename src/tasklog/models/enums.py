"""Domain enumerations and their stored integer codes.

Each enum has exactly one ``IntCodes`` table. Rows written by older versions
use the same integers, so the tables must never be renumbered.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

E = TypeVar("E", bound=Enum)


class IntCodes(Generic[E]):
    """Bidirectional mapping between enum members and stored integers."""

    def __init__(self, enum_cls: type[E], codes: dict[E, int]):
        missing = set(enum_cls) - set(codes)
        if missing:
            raise ValueError(f"No code for {sorted(m.name for m in missing)}")
        if len(set(codes.values())) != len(codes):
            raise ValueError(f"Duplicate codes in {enum_cls.__name__} mapping")
        self.enum_cls = enum_cls
        self._to_code = dict(codes)
        self._to_member = {code: member for member, code in codes.items()}

    def encode(self, member: E) -> int:
        return self._to_code[member]

    def decode(self, code: int) -> E:
        try:
            return self._to_member[int(code)]
        except KeyError:
            raise ValueError(
                f"Unknown {self.enum_cls.__name__} code: {code!r}"
            ) from None

    def __contains__(self, code: object) -> bool:
        return code in self._to_member


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return PRIORITY_CODES.encode(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank


class TaskStatus(str, Enum):
    """Task status. ``ALL`` only appears in list filters, never in a row."""

    OPEN = "open"
    DONE = "done"
    ALL = "all"


class SessionKind(str, Enum):
    WORK = "work"
    REST = "rest"


class SessionStatus(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"

    @property
    def is_final(self) -> bool:
        return self is not SessionStatus.RUNNING


PRIORITY_CODES = IntCodes(
    Priority,
    {
        Priority.LOW: 1,
        Priority.MEDIUM: 2,
        Priority.HIGH: 3,
        Priority.URGENT: 4,
    },
)

TASK_STATUS_CODES = IntCodes(
    TaskStatus,
    {
        TaskStatus.OPEN: 0,
        TaskStatus.DONE: 1,
        TaskStatus.ALL: 2,
    },
)

SESSION_KIND_CODES = IntCodes(
    SessionKind,
    {
        SessionKind.WORK: 0,
        SessionKind.REST: 1,
    },
)

SESSION_STATUS_CODES = IntCodes(
    SessionStatus,
    {
        SessionStatus.RUNNING: 0,
        SessionStatus.PAUSED: 1,
        SessionStatus.FINISHED: 2,
    },
)
