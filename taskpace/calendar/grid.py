"""
TASKPACE API - Calendar Grid Builder

Month and week grids, Monday first. A month grid starts on the Monday on
or before the 1st and keeps adding whole weeks until the month is covered,
up to six rows.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Dict, List, Union

from taskpace.calendar.dates import as_local_date, date_key, end_of_month, is_today, start_of_week
from taskpace.calendar.schemas import CalendarDay, CalendarItem, CalendarMonth, CalendarWeek

MAX_WEEKS = 6
DAYS_PER_WEEK = 7


def _build_day(
    day: date,
    is_current_month: bool,
    items_by_date: Dict[str, List[CalendarItem]],
    now: datetime,
    tz: tzinfo,
) -> CalendarDay:
    return CalendarDay(
        date=day,
        is_current_month=is_current_month,
        is_today=is_today(day, now, tz),
        items=list(items_by_date.get(date_key(day, tz), [])),
    )


def build_month(
    year: int,
    month: int,
    items_by_date: Dict[str, List[CalendarItem]],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> CalendarMonth:
    """
    Build the grid for a month.

    Args:
        year: Calendar year
        month: 0-based month (0 = January)
        items_by_date: Day key -> ordered items, as produced by group_by_date
        now: Reference time for the "today" marker
        tz: Wall-clock zone of the grid cells
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month must be between 0 and 11, got {month}")

    first_day = date(year, month + 1, 1)
    last_day = end_of_month(first_day)
    current = start_of_week(first_day)

    weeks: List[CalendarWeek] = []
    for week_index in range(MAX_WEEKS):
        days: List[CalendarDay] = []
        for _ in range(DAYS_PER_WEEK):
            in_month = (current.year, current.month) == (first_day.year, first_day.month)
            days.append(_build_day(current, in_month, items_by_date, now, tz))
            current += timedelta(days=1)
        weeks.append(CalendarWeek(days=days))

        # Stop once a completed week has moved past the end of the month
        if current > last_day and week_index > 0:
            break

    return CalendarMonth(year=year, month=month, weeks=weeks)


def build_week(
    anchor: Union[date, datetime],
    items_by_date: Dict[str, List[CalendarItem]],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> CalendarWeek:
    """Build the Monday-first week containing ``anchor``. Every day counts as current."""
    start = start_of_week(as_local_date(anchor, tz))
    days = [
        _build_day(start + timedelta(days=offset), True, items_by_date, now, tz)
        for offset in range(DAYS_PER_WEEK)
    ]
    return CalendarWeek(days=days)
