"""
TASKPACE API - Calendar Date Primitive Tests
"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from taskpace.calendar.dates import (
    date_key,
    end_of_month,
    is_same_day,
    is_today,
    start_of_month,
    start_of_week,
)


class TestDateKey:
    """Tests for the UTC-based day key."""

    def test_utc_datetime(self):
        assert date_key(datetime(2025, 1, 15, 23, 59, tzinfo=timezone.utc)) == "2025-01-15"

    def test_offset_datetime_uses_utc_day(self):
        """01:00 at +02:00 is still the previous day in UTC."""
        moment = datetime(2025, 1, 15, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert date_key(moment) == "2025-01-14"

    def test_plain_date_in_utc(self):
        assert date_key(date(2025, 3, 1)) == "2025-03-01"

    def test_plain_date_east_of_utc_lands_on_previous_day(self):
        """Local midnight east of UTC is the previous UTC day; this is kept on purpose."""
        assert date_key(date(2025, 3, 1), ZoneInfo("Europe/Berlin")) == "2025-02-28"

    def test_plain_date_west_of_utc_keeps_day(self):
        assert date_key(date(2025, 3, 1), ZoneInfo("America/New_York")) == "2025-03-01"

    def test_naive_datetime_is_local(self):
        assert date_key(datetime(2025, 1, 15, 0, 30), ZoneInfo("Europe/Berlin")) == "2025-01-14"


class TestSameDay:
    def test_same_day_different_times(self):
        first = datetime(2025, 1, 15, 0, 1, tzinfo=timezone.utc)
        second = datetime(2025, 1, 15, 23, 59, tzinfo=timezone.utc)
        assert is_same_day(first, second)

    def test_different_days(self):
        assert not is_same_day(date(2025, 1, 15), date(2025, 1, 16))

    def test_is_today_compares_with_now(self, frozen_now):
        assert is_today(date(2025, 1, 15), frozen_now)
        assert not is_today(date(2025, 1, 14), frozen_now)


class TestStartOfWeek:
    """Monday-first week boundaries."""

    def test_every_day_maps_to_a_monday_within_six_days(self):
        """For a whole year, the week start is a Monday 0..6 days back."""
        day = date(2024, 1, 1)
        while day < date(2025, 1, 1):
            monday = start_of_week(day)
            assert monday.weekday() == 0
            assert 0 <= (day - monday).days <= 6
            day += timedelta(days=1)

    def test_sunday_goes_back_six_days(self):
        assert start_of_week(date(2025, 1, 19)) == date(2025, 1, 13)

    def test_monday_is_its_own_start(self):
        assert start_of_week(date(2025, 1, 13)) == date(2025, 1, 13)

    def test_crosses_month_and_year(self):
        assert start_of_week(date(2025, 1, 1)) == date(2024, 12, 30)

    def test_datetime_keeps_time_of_day(self):
        moment = datetime(2025, 1, 16, 9, 30, tzinfo=timezone.utc)
        assert start_of_week(moment) == datetime(2025, 1, 13, 9, 30, tzinfo=timezone.utc)


class TestMonthBounds:
    @pytest.mark.parametrize(
        "value, start, end",
        [
            (date(2025, 1, 15), date(2025, 1, 1), date(2025, 1, 31)),
            (date(2024, 2, 10), date(2024, 2, 1), date(2024, 2, 29)),
            (date(2025, 2, 10), date(2025, 2, 1), date(2025, 2, 28)),
            (datetime(2025, 4, 30, 18, 0), date(2025, 4, 1), date(2025, 4, 30)),
        ],
    )
    def test_start_and_end_of_month(self, value, start, end):
        assert start_of_month(value) == start
        assert end_of_month(value) == end
