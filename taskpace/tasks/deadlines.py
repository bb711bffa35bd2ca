"""
TASKPACE API - Deadline Parsing

Deadlines travel as ISO-8601-like strings. This module is the only place
they are turned into instants, so a malformed value fails here and
nowhere else.
"""

import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from taskpace.tasks.enums import DeadlineStatus


DEFAULT_WARNING_HOURS = 6


class InvalidDeadlineError(ValueError):
    """Raised when a deadline string cannot be parsed into an instant."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid deadline: {value!r}")


def parse_deadline(value: str, tz: tzinfo = timezone.utc) -> datetime:
    """
    Parse a deadline string into a timezone-aware datetime.

    Strings with an explicit offset keep it. Strings with a time of day but
    no offset are local wall-clock time in ``tz``. Date-only strings
    ("2025-01-15") are midnight UTC, matching how browsers read them.

    Raises:
        InvalidDeadlineError: if the value is not a parseable date string
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDeadlineError(value)

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDeadlineError(value) from exc

    if parsed.tzinfo is None:
        if "T" not in text and " " not in text:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.replace(tzinfo=tz)
    return parsed


def to_epoch_ms(moment: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return int(moment.timestamp() * 1000)


def from_epoch_ms(value: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def is_overdue(deadline: str, now: datetime, tz: tzinfo = timezone.utc) -> bool:
    """A deadline is overdue only once it is strictly in the past."""
    return parse_deadline(deadline, tz) < now


def deadline_status(
    deadline: str,
    now: datetime,
    tz: tzinfo = timezone.utc,
    warning_hours: Optional[int] = None,
) -> DeadlineStatus:
    """Classify a deadline as overdue, inside the warning window, or normal."""
    if warning_hours is None:
        warning_hours = DEFAULT_WARNING_HOURS

    remaining = parse_deadline(deadline, tz) - now
    if remaining < timedelta(0):
        return DeadlineStatus.OVERDUE
    if remaining <= timedelta(hours=warning_hours):
        return DeadlineStatus.WARNING
    return DeadlineStatus.NORMAL


def hours_until_deadline(deadline: str, now: datetime, tz: tzinfo = timezone.utc) -> int:
    """Whole hours until the deadline, floored (negative once overdue)."""
    remaining = parse_deadline(deadline, tz) - now
    return math.floor(remaining / timedelta(hours=1))
