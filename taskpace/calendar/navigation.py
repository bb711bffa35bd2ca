"""
TASKPACE API - Calendar Navigation

Visible date range, previous/next anchors and titles for the calendar view.
"""

import calendar
from datetime import date, timedelta
from typing import List

from taskpace.calendar.dates import end_of_month, start_of_month, start_of_week
from taskpace.calendar.enums import CalendarMode
from taskpace.calendar.schemas import DateRange

# English names regardless of process locale
MONTH_NAMES = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def weekday_names() -> List[str]:
    return list(WEEKDAY_NAMES)


def _shift_month(value: date, months: int) -> date:
    """Move by whole months, clamping the day to the target month's length."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def date_range(mode: CalendarMode, value: date) -> DateRange:
    if mode == CalendarMode.WEEKLY:
        start = start_of_week(value)
        return DateRange(start=start, end=start + timedelta(days=6))
    return DateRange(start=start_of_month(value), end=end_of_month(value))


def previous_period(mode: CalendarMode, value: date) -> date:
    if mode == CalendarMode.WEEKLY:
        return value - timedelta(days=7)
    return _shift_month(value, -1)


def next_period(mode: CalendarMode, value: date) -> date:
    if mode == CalendarMode.WEEKLY:
        return value + timedelta(days=7)
    return _shift_month(value, 1)


def format_period_title(mode: CalendarMode, value: date) -> str:
    """
    Title of the visible period.

    - monthly: "January 2025"
    - weekly within one month: "January 2025 - Week of 13"
    - weekly across months: "Jan 27 - Feb 2, 2025"
    """
    if mode == CalendarMode.MONTHLY:
        return f"{MONTH_NAMES[value.month]} {value.year}"

    start = start_of_week(value)
    end = start + timedelta(days=6)
    if start.month == end.month:
        return f"{MONTH_NAMES[start.month]} {start.year} - Week of {start.day}"
    return (
        f"{MONTH_NAMES[start.month][:3]} {start.day} - "
        f"{MONTH_NAMES[end.month][:3]} {end.day}, {end.year}"
    )
