"""Parsers for duration and date arguments.

Durations are ``<int><unit>`` with unit ``s``, ``m`` or ``h``; a bare
integer means minutes. Dates are an offset ``<int><unit>`` with unit ``d``,
``m`` (calendar months) or ``y``, or an absolute ``YYYY-MM-DD``.
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timedelta

import tzlocal

from tasklog.errors import ValidationError

_DURATION_RE = re.compile(r"^(\d+)([smh]?)$")
_OFFSET_RE = re.compile(r"^(\d+)([dmy])$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_DURATION_UNITS = {"s": 1, "m": 60, "h": 3600, "": 60}


def local_now() -> datetime:
    return datetime.now(tzlocal.get_localzone())


def parse_duration(text: str) -> timedelta:
    """Parse ``25m``, ``90s``, ``1h`` or ``25``.

    Raises:
        ValidationError: If the text is malformed or zero
    """
    match = _DURATION_RE.match(text.strip().lower())
    if not match:
        raise ValidationError(f"Invalid duration '{text}', expected e.g. 25m, 90s or 1h")
    seconds = int(match.group(1)) * _DURATION_UNITS[match.group(2)]
    if seconds == 0:
        raise ValidationError("Duration cannot be 0")
    return timedelta(seconds=seconds)


def add_months(value: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's end."""
    index = value.month - 1 + months
    year, month = value.year + index // 12, index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def parse_date(text: str, *, backward: bool = False, now: datetime | None = None) -> datetime:
    """Resolve a date argument to an aware datetime.

    Offsets count forward from *now* (due dates) or, with ``backward``,
    into the past (``--since``). Absolute dates mean local midnight.

    Raises:
        ValidationError: If the text matches neither form
    """
    text = text.strip()
    now = now or local_now()

    if _DATE_RE.match(text):
        try:
            day = datetime.strptime(text, "%Y-%m-%d")
        except ValueError as e:
            raise ValidationError(f"Invalid date '{text}': {e}") from e
        return day.replace(tzinfo=tzlocal.get_localzone())

    match = _OFFSET_RE.match(text.lower())
    if not match:
        raise ValidationError(
            f"Invalid date '{text}', expected an offset like 1d, 2m, 1y or YYYY-MM-DD"
        )

    amount = int(match.group(1))
    if backward:
        amount = -amount
    unit = match.group(2)
    if unit == "d":
        return now + timedelta(days=amount)
    if unit == "m":
        return add_months(now, amount)
    return add_months(now, amount * 12)
