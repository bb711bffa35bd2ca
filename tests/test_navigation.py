"""
TASKPACE API - Calendar Navigation Tests
"""

from datetime import date

from taskpace.calendar.enums import CalendarMode
from taskpace.calendar.navigation import (
    date_range,
    format_period_title,
    next_period,
    previous_period,
    weekday_names,
)


class TestDateRange:
    def test_monthly_range(self):
        visible = date_range(CalendarMode.MONTHLY, date(2024, 2, 10))
        assert (visible.start, visible.end) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_weekly_range(self):
        visible = date_range(CalendarMode.WEEKLY, date(2025, 1, 15))
        assert (visible.start, visible.end) == (date(2025, 1, 13), date(2025, 1, 19))


class TestPeriodNavigation:
    """Tests for previous/next anchors."""

    def test_weekly_moves_seven_days(self):
        assert previous_period(CalendarMode.WEEKLY, date(2025, 1, 3)) == date(2024, 12, 27)
        assert next_period(CalendarMode.WEEKLY, date(2025, 1, 29)) == date(2025, 2, 5)

    def test_monthly_moves_one_month(self):
        assert previous_period(CalendarMode.MONTHLY, date(2025, 1, 15)) == date(2024, 12, 15)
        assert next_period(CalendarMode.MONTHLY, date(2025, 12, 1)) == date(2026, 1, 1)

    def test_monthly_clamps_to_month_end(self):
        """March 31st steps back to the last day of February."""
        assert previous_period(CalendarMode.MONTHLY, date(2025, 3, 31)) == date(2025, 2, 28)
        assert next_period(CalendarMode.MONTHLY, date(2024, 1, 31)) == date(2024, 2, 29)


class TestPeriodTitle:
    def test_monthly_title(self):
        assert format_period_title(CalendarMode.MONTHLY, date(2025, 1, 15)) == "January 2025"

    def test_weekly_title_within_one_month(self):
        assert format_period_title(CalendarMode.WEEKLY, date(2025, 1, 15)) == "January 2025 - Week of 13"

    def test_weekly_title_across_months(self):
        assert format_period_title(CalendarMode.WEEKLY, date(2025, 1, 29)) == "Jan 27 - Feb 2, 2025"

    def test_weekly_title_across_years(self):
        assert format_period_title(CalendarMode.WEEKLY, date(2024, 12, 31)) == "Dec 30 - Jan 5, 2025"


class TestWeekdayNames:
    def test_monday_first(self):
        assert weekday_names() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
