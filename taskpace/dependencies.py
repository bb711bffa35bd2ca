"""
TASKPACE API - Shared Dependencies

Clock and timezone providers. Routers take these through FastAPI's
dependency injection so tests can freeze time.
"""

from datetime import datetime, timezone, tzinfo
from typing import Annotated, Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends

from taskpace.config import settings


def resolve_timezone(name: str) -> tzinfo:
    """
    Resolve a timezone name into a tzinfo.

    "UTC" resolves to ``timezone.utc``; anything else must be an IANA name.
    Raises ValueError for unknown identifiers.
    """
    if not name or name.strip().upper() in ("UTC", "Z", "GMT"):
        return timezone.utc
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Invalid timezone identifier: {name!r}") from exc


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def get_clock() -> Callable[[], datetime]:
    """Dependency returning the clock used for 'now'."""
    return _utcnow


def get_timezone() -> tzinfo:
    """Dependency returning the configured wall-clock zone."""
    return resolve_timezone(settings.TIMEZONE)


Clock = Annotated[Callable[[], datetime], Depends(get_clock)]
LocalZone = Annotated[tzinfo, Depends(get_timezone)]
