"""
TASKPACE API - Calendar Date Primitives

Day keys and week/month boundaries used by grouping and the grid builder.
"""

import calendar
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import TypeVar, Union

DateLike = TypeVar("DateLike", date, datetime)


def local_midnight(day: date, tz: tzinfo = timezone.utc) -> datetime:
    """Midnight of a calendar day on the local wall clock."""
    return datetime(day.year, day.month, day.day, tzinfo=tz)


def as_local_date(value: Union[date, datetime], tz: tzinfo = timezone.utc) -> date:
    """The local calendar day of a date or datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()
    return value


def date_key(value: Union[date, datetime], tz: tzinfo = timezone.utc) -> str:
    """
    Canonical YYYY-MM-DD grouping key.

    The key is the UTC calendar day of the instant. A plain date stands for
    local midnight, so with a positive UTC offset its key is the previous
    day. Grid cells and deadlines both go through here, which keeps them
    consistent with each other. Swap this function, and only this one, to
    move to local-day keys.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=tz)
    else:
        moment = local_midnight(value, tz)
    return moment.astimezone(timezone.utc).date().isoformat()


def is_same_day(first: Union[date, datetime], second: Union[date, datetime], tz: tzinfo = timezone.utc) -> bool:
    return date_key(first, tz) == date_key(second, tz)


def is_today(value: Union[date, datetime], now: datetime, tz: tzinfo = timezone.utc) -> bool:
    return is_same_day(value, now, tz)


def start_of_week(value: DateLike) -> DateLike:
    """Monday of the week containing ``value`` (time of day is kept)."""
    return value - timedelta(days=value.weekday())


def start_of_month(value: Union[date, datetime]) -> date:
    return date(value.year, value.month, 1)


def end_of_month(value: Union[date, datetime]) -> date:
    return date(value.year, value.month, calendar.monthrange(value.year, value.month)[1])
