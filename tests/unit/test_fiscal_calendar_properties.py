"""
Fiscal calendar properties checked across whole fiscal years.

Week numbering, spans and YYYYWW conversions must agree with each other for
every date and every configurable week start day.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.components.fiscal_calendar import (
    MAX_WEEK,
    MIN_WEEK,
    FiscalWeekOutOfRangeError,
    fiscal_period,
    fiscal_week_number,
    fiscal_week_range,
    fiscal_week_to_year_month,
    fiscal_year,
    js_weekday,
    week_range_containing,
)

FISCAL_YEARS = range(2019, 2032)
START_DAYS = range(0, 7)


def _days(start: date, end: date) -> list[date]:
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


class TestRoundTrip:
    """Week span start dates map back to their fiscal year and week."""

    @pytest.mark.parametrize("fy", FISCAL_YEARS)
    def test_range_start_round_trips(self, fy: int) -> None:
        for week in range(2, MAX_WEEK + 1):
            start = fiscal_week_range(fy, week).start
            assert fiscal_year(start) == fy
            assert fiscal_week_number(start) == week

    @pytest.mark.parametrize("start_day", START_DAYS)
    def test_round_trip_for_every_start_day(self, start_day: int) -> None:
        for week in range(2, MAX_WEEK + 1):
            start = fiscal_week_range(2025, week, start_day).start
            assert fiscal_year(start, start_day) == 2025
            assert fiscal_week_number(start, start_day) == week


class TestWeekSpans:
    """Week spans are contiguous and correctly sized."""

    @pytest.mark.parametrize("fy", FISCAL_YEARS)
    def test_later_weeks_are_seven_days(self, fy: int) -> None:
        for week in range(2, MAX_WEEK + 1):
            week_range = fiscal_week_range(fy, week)
            assert week_range.end - week_range.start == timedelta(days=6)

    @pytest.mark.parametrize("fy", FISCAL_YEARS)
    def test_weeks_advance_by_seven_days(self, fy: int) -> None:
        for week in range(2, MAX_WEEK):
            this_start = fiscal_week_range(fy, week).start
            next_start = fiscal_week_range(fy, week + 1).start
            assert next_start - this_start == timedelta(days=7)

    @pytest.mark.parametrize("fy", FISCAL_YEARS)
    @pytest.mark.parametrize("start_day", START_DAYS)
    def test_week_one_span(self, fy: int, start_day: int) -> None:
        week_one = fiscal_week_range(fy, 1, start_day)

        assert 1 <= week_one.days <= 13
        assert js_weekday(week_one.start) == start_day
        assert week_one.end + timedelta(days=1) == fiscal_week_range(fy, 2, start_day).start

    @pytest.mark.parametrize("fy", FISCAL_YEARS)
    def test_week_one_dates_report_week_one(self, fy: int) -> None:
        for day in fiscal_week_range(fy, 1).dates():
            assert fiscal_week_number(day) == 1
            assert fiscal_period(day).fiscal_year == fy


class TestBoundary:
    """June 30 / July 1 boundary behaviour."""

    @pytest.mark.parametrize("year", range(2019, 2032))
    def test_june_thirtieth_is_in_upcoming_week_one(self, year: int) -> None:
        june_30 = date(year, 6, 30)
        july_1 = date(year, 7, 1)

        assert fiscal_week_number(june_30) == 1
        assert fiscal_period(june_30).fiscal_year == fiscal_year(july_1) == year + 1

    @pytest.mark.parametrize("year", range(2019, 2032))
    def test_before_last_june_start_day_is_previous_year(self, year: int) -> None:
        week_one = fiscal_week_range(year + 1, 1)
        day_before = week_one.start - timedelta(days=1)

        assert fiscal_year(day_before) == year
        assert fiscal_week_number(day_before) != 1


class TestClamp:
    """Forward lookups never leave 1-52."""

    @pytest.mark.parametrize("start_day", START_DAYS)
    def test_full_year_sweep_stays_in_range(self, start_day: int) -> None:
        for day in _days(date(2023, 6, 1), date(2025, 7, 31)):
            assert MIN_WEEK <= fiscal_week_number(day, start_day) <= MAX_WEEK

    def test_strict_mode_only_raises_where_clamping_happens(self) -> None:
        for day in _days(date(2023, 7, 1), date(2024, 6, 30)):
            try:
                week = fiscal_week_number(day, strict=True)
            except FiscalWeekOutOfRangeError:
                assert date(2024, 6, 22) <= day <= date(2024, 6, 28)
            else:
                assert week == fiscal_week_number(day)


class TestFormatRoundTrip:
    """YYYYWW codes convert to the month their week starts in."""

    def test_every_day_of_fiscal_year(self) -> None:
        for day in _days(date(2024, 6, 29), date(2025, 6, 27)):
            period = fiscal_period(day)
            start = week_range_containing(day).start

            assert fiscal_week_to_year_month(period.code) == f"{start:%y%m}"
            assert week_range_containing(day).contains(day)
