"""
Fiscal calendar component unit tests.

Tests for date to fiscal week lookups, week spans and YYYYWW conversions.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from src.components.fiscal_calendar import (
    FiscalLookupInput,
    FiscalWeek,
    FiscalWeekOutOfRangeError,
    FiscalWeekRange,
    FiscalYearOutOfRangeError,
    InvalidDateError,
    InvalidFiscalWeekFormatError,
    InvalidWeekStartDayError,
    WeekRangeInput,
    YearMonthInput,
    coerce_date,
    first_start_weekday_on_or_after,
    fiscal_period,
    fiscal_week,
    fiscal_week_number,
    fiscal_week_range,
    fiscal_week_to_year_month,
    fiscal_year,
    format_fiscal_week,
    js_weekday,
    last_start_weekday_of_june,
    month_name,
    month_trend_name,
    parse_fiscal_week_code,
    run,
    run_lookup,
    run_week_range,
    run_year_month,
)

# --- Mock Rules ---


class MockRules:
    """Rules port stub for testing."""

    def __init__(self, week_start_day: int = 6, strict: bool = False) -> None:
        self._week_start_day = week_start_day
        self._strict = strict

    def get_week_start_day(self) -> int:
        return self._week_start_day

    def get_strict_week_numbers(self) -> bool:
        return self._strict


# --- Helper Tests ---


class TestWeekdayHelpers:
    """Test weekday arithmetic helpers."""

    def test_js_weekday_sunday_is_zero(self) -> None:
        assert js_weekday(date(2024, 6, 30)) == 0

    def test_js_weekday_saturday_is_six(self) -> None:
        assert js_weekday(date(2024, 6, 29)) == 6

    def test_first_start_weekday_same_day(self) -> None:
        """July 1 2023 is a Saturday, so it is its own first Saturday."""
        assert first_start_weekday_on_or_after(date(2023, 7, 1)) == date(2023, 7, 1)

    def test_first_start_weekday_later_in_week(self) -> None:
        assert first_start_weekday_on_or_after(date(2024, 7, 1)) == date(2024, 7, 6)

    def test_last_saturday_of_june(self) -> None:
        assert last_start_weekday_of_june(2024) == date(2024, 6, 29)
        assert last_start_weekday_of_june(2023) == date(2023, 6, 24)

    def test_last_monday_of_june(self) -> None:
        assert last_start_weekday_of_june(2024, 1) == date(2024, 6, 24)


class TestCoerceDate:
    """Test date input normalisation."""

    def test_date_passthrough(self) -> None:
        assert coerce_date(date(2024, 7, 15)) == date(2024, 7, 15)

    def test_datetime_keeps_calendar_date(self) -> None:
        assert coerce_date(datetime(2024, 7, 15, 23, 59)) == date(2024, 7, 15)

    def test_iso_string(self) -> None:
        assert coerce_date("2024-07-15") == date(2024, 7, 15)

    def test_iso_datetime_string(self) -> None:
        assert coerce_date("2024-07-15T08:30:00") == date(2024, 7, 15)

    @pytest.mark.parametrize("value", ["", "   ", "not-a-date", "2024-13-01", "2024/07/15"])
    def test_invalid_strings_raise(self, value: str) -> None:
        with pytest.raises(InvalidDateError):
            coerce_date(value)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            coerce_date(20240715)  # type: ignore[arg-type]


# --- Forward Lookup Tests ---


class TestFiscalYear:
    """Test fiscal year lookups."""

    def test_july_belongs_to_next_year(self) -> None:
        assert fiscal_year(date(2024, 7, 15)) == 2025

    def test_march_belongs_to_same_year(self) -> None:
        assert fiscal_year(date(2024, 3, 10)) == 2024

    def test_july_first(self) -> None:
        assert fiscal_year(date(2024, 7, 1)) == 2025

    def test_early_june(self) -> None:
        assert fiscal_year(date(2024, 6, 10)) == 2024

    def test_late_june_week_one_reports_calendar_year(self) -> None:
        """Late-June week 1 dates keep their calendar year as fiscal year."""
        assert fiscal_year(date(2024, 6, 29)) == 2024

    def test_accepts_iso_string(self) -> None:
        assert fiscal_year("2024-07-15") == 2025

    def test_invalid_start_day(self) -> None:
        with pytest.raises(InvalidWeekStartDayError):
            fiscal_year(date(2024, 7, 15), 7)


class TestFiscalWeekNumber:
    """Test fiscal week number lookups."""

    def test_first_saturday_after_july_first_is_week_two(self) -> None:
        assert fiscal_week_number(date(2024, 7, 6)) == 2

    def test_july_first_before_first_saturday_is_week_one(self) -> None:
        assert fiscal_week_number(date(2024, 7, 1)) == 1
        assert fiscal_week_number(date(2024, 7, 5)) == 1

    def test_late_june_is_week_one(self) -> None:
        assert fiscal_week_number(date(2024, 6, 29)) == 1
        assert fiscal_week_number(date(2024, 6, 30)) == 1

    def test_mid_year(self) -> None:
        assert fiscal_week_number(date(2025, 1, 30)) == 31
        assert fiscal_week_number(date(2025, 1, 15)) == 29

    def test_march(self) -> None:
        assert fiscal_week_number(date(2024, 3, 10)) == 38

    def test_clamps_to_fifty_two(self) -> None:
        """June 22-28 2024 would be week 53 and is clamped."""
        assert fiscal_week_number(date(2024, 6, 22)) == 52
        assert fiscal_week_number(date(2024, 6, 28)) == 52

    def test_strict_mode_raises_instead_of_clamping(self) -> None:
        with pytest.raises(FiscalWeekOutOfRangeError) as exc_info:
            fiscal_week_number(date(2024, 6, 28), strict=True)
        assert exc_info.value.week == 53

    def test_strict_mode_in_range_is_unchanged(self) -> None:
        assert fiscal_week_number(date(2024, 7, 6), strict=True) == 2

    def test_sunday_start_day(self) -> None:
        """With Sunday weeks, July 7 2024 starts week 2."""
        assert fiscal_week_number(date(2024, 7, 6), 0) == 1
        assert fiscal_week_number(date(2024, 7, 7), 0) == 2

    def test_invalid_string_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            fiscal_week_number("July 6th")


class TestFiscalWeek:
    """Test combined fiscal week values and labels."""

    def test_fiscal_week_value(self) -> None:
        week = fiscal_week(date(2024, 7, 13))
        assert week == FiscalWeek(fiscal_year=2025, week=3)
        assert week.code == "202503"

    def test_default_label(self) -> None:
        assert format_fiscal_week(date(2024, 7, 13)) == "2025-03"

    def test_long_label(self) -> None:
        assert format_fiscal_week(date(2024, 7, 13), "YYYY Week WW") == "2025 Week 03"

    def test_fiscal_period_moves_late_june_forward(self) -> None:
        assert fiscal_period(date(2024, 6, 29)) == FiscalWeek(fiscal_year=2025, week=1)

    def test_fiscal_period_matches_fiscal_week_elsewhere(self) -> None:
        assert fiscal_period(date(2024, 7, 3)) == fiscal_week(date(2024, 7, 3))
        assert fiscal_period(date(2024, 6, 28)) == FiscalWeek(fiscal_year=2024, week=52)


# --- Reverse Lookup Tests ---


class TestFiscalWeekRange:
    """Test fiscal week span lookups."""

    def test_week_one(self) -> None:
        assert fiscal_week_range(2025, 1) == FiscalWeekRange(
            start=date(2024, 6, 29), end=date(2024, 7, 5)
        )

    def test_week_two(self) -> None:
        assert fiscal_week_range(2025, 2) == FiscalWeekRange(
            start=date(2024, 7, 6), end=date(2024, 7, 12)
        )

    def test_week_three(self) -> None:
        week_range = fiscal_week_range(2025, 3)
        assert week_range.start == date(2024, 7, 13)
        assert week_range.end == date(2024, 7, 19)
        assert week_range.days == 7

    def test_week_fifty_two(self) -> None:
        assert fiscal_week_range(2025, 52).start == date(2025, 6, 21)

    def test_range_contains(self) -> None:
        week_range = fiscal_week_range(2025, 2)
        assert week_range.contains(date(2024, 7, 9))
        assert not week_range.contains(date(2024, 7, 13))
        assert len(week_range.dates()) == 7

    @pytest.mark.parametrize("fy", [0, 1, 10001])
    def test_unrepresentable_fiscal_year_raises(self, fy: int) -> None:
        with pytest.raises(FiscalYearOutOfRangeError):
            fiscal_week_range(fy, 3)

    def test_last_supported_fiscal_year(self) -> None:
        assert fiscal_week_range(9999, 52).end.year == 9999

    def test_week_beyond_calendar_raises(self) -> None:
        with pytest.raises(FiscalWeekOutOfRangeError):
            fiscal_week_range(9999, 10**6)


class TestYearWeekCodes:
    """Test YYYYWW parsing and YYMM conversion."""

    def test_parse_code(self) -> None:
        assert parse_fiscal_week_code("202503") == FiscalWeek(fiscal_year=2025, week=3)

    def test_week_one_maps_to_june(self) -> None:
        assert fiscal_week_to_year_month("202501") == "2406"

    def test_week_two_maps_to_july(self) -> None:
        assert fiscal_week_to_year_month("202502") == "2407"

    def test_mid_year_code(self) -> None:
        assert fiscal_week_to_year_month("202531") == "2501"

    def test_five_characters_is_invalid_format(self) -> None:
        with pytest.raises(InvalidFiscalWeekFormatError):
            fiscal_week_to_year_month("20251")

    def test_non_numeric_is_invalid_format(self) -> None:
        with pytest.raises(InvalidFiscalWeekFormatError):
            fiscal_week_to_year_month("2025AB")

    def test_week_zero_is_out_of_range(self) -> None:
        with pytest.raises(FiscalWeekOutOfRangeError):
            fiscal_week_to_year_month("202500")

    def test_week_fifty_three_is_out_of_range(self) -> None:
        with pytest.raises(FiscalWeekOutOfRangeError):
            fiscal_week_to_year_month("202553")

    @pytest.mark.parametrize("code", ["000003", "000103"])
    def test_year_before_calendar_is_invalid_format(self, code: str) -> None:
        with pytest.raises(InvalidFiscalWeekFormatError):
            fiscal_week_to_year_month(code)

    def test_earliest_year(self) -> None:
        assert parse_fiscal_week_code("000203") == FiscalWeek(fiscal_year=2, week=3)


class TestMonthLabels:
    """Test month label helpers."""

    def test_month_name(self) -> None:
        assert month_name("2406") == "Jun`24"
        assert month_name(2501) == "Jan`25"

    def test_invalid_month_name_returned_unchanged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert month_name("2413") == "2413"
            assert month_name("24") == "24"
        assert "Invalid" in caplog.text

    def test_week_trend_name(self) -> None:
        assert month_trend_name("250112") == "WW12 Jan`25"

    def test_month_rollup_trend_name(self) -> None:
        assert month_trend_name("240699") == "Jun`24"


# --- Component Entry Point Tests ---


class TestRunLookup:
    """Test the date lookup entry point."""

    def test_lookup_success(self) -> None:
        result = run_lookup(FiscalLookupInput(date="2025-01-15"))

        assert result.success is True
        assert result.fiscal_week == FiscalWeek(fiscal_year=2025, week=29)
        assert result.label == "2025-29"
        assert result.week_range is not None
        assert result.week_range.contains(date(2025, 1, 15))
        assert len(result.errors) == 0

    def test_lookup_late_june_range_holds_date(self) -> None:
        result = run_lookup(FiscalLookupInput(date=date(2024, 6, 30)))

        assert result.success is True
        assert result.week_range == fiscal_week_range(2025, 1)

    def test_lookup_invalid_date(self) -> None:
        result = run_lookup(FiscalLookupInput(date="garbage"))

        assert result.success is False
        assert result.fiscal_week is None
        assert result.errors[0].code == "invalid_date"
        assert result.errors[0].field == "date"

    @pytest.mark.parametrize("value", ["0001-01-01", "9999-12-31"])
    def test_lookup_date_outside_fiscal_calendar(self, value: str) -> None:
        result = run_lookup(FiscalLookupInput(date=value))

        assert result.success is False
        assert result.errors[0].code == "fiscal_year_out_of_range"
        assert result.errors[0].field == "date"

    def test_lookup_invalid_start_day(self) -> None:
        result = run_lookup(FiscalLookupInput(date="2025-01-15", week_start_day=9))

        assert result.success is False
        assert result.errors[0].code == "invalid_week_start_day"
        assert result.errors[0].field == "week_start_day"

    def test_lookup_uses_rules_start_day(self) -> None:
        result = run_lookup(FiscalLookupInput(date="2024-07-07"), rules=MockRules(week_start_day=0))

        assert result.fiscal_week is not None
        assert result.fiscal_week.week == 2

    def test_lookup_strict_from_rules(self) -> None:
        result = run_lookup(FiscalLookupInput(date="2024-06-28"), rules=MockRules(strict=True))

        assert result.success is False
        assert result.errors[0].code == "week_out_of_range"


class TestRunWeekRange:
    """Test the week span entry point."""

    def test_week_range_success(self) -> None:
        result = run_week_range(WeekRangeInput(fiscal_year=2025, week=3))

        assert result.success is True
        assert result.week_range == FiscalWeekRange(
            start=date(2024, 7, 13), end=date(2024, 7, 19)
        )

    @pytest.mark.parametrize("week", [0, 53, -1, 100])
    def test_week_range_out_of_range(self, week: int) -> None:
        result = run_week_range(WeekRangeInput(fiscal_year=2025, week=week))

        assert result.success is False
        assert result.week_range is None
        assert result.errors[0].code == "week_out_of_range"
        assert result.errors[0].field == "week"

    @pytest.mark.parametrize("fy", [0, 10001])
    def test_week_range_fiscal_year_out_of_range(self, fy: int) -> None:
        result = run_week_range(WeekRangeInput(fiscal_year=fy, week=3))

        assert result.success is False
        assert result.week_range is None
        assert result.errors[0].code == "fiscal_year_out_of_range"
        assert result.errors[0].field == "fiscal_year"


class TestRunYearMonth:
    """Test the YYYYWW to YYMM entry point."""

    def test_year_month_success(self) -> None:
        result = run_year_month(YearMonthInput(code="202501"))

        assert result.success is True
        assert result.yearmonth == "2406"
        assert result.month_label == "Jun`24"

    def test_year_month_invalid_format(self) -> None:
        result = run_year_month(YearMonthInput(code="20251"))

        assert result.success is False
        assert result.errors[0].code == "invalid_format"
        assert result.errors[0].field == "code"

    def test_year_month_year_zero(self) -> None:
        result = run_year_month(YearMonthInput(code="000103"))

        assert result.success is False
        assert result.errors[0].code == "invalid_format"


class TestRunDispatch:
    """Test the run() dispatcher."""

    def test_dispatches_by_input_type(self) -> None:
        assert run(YearMonthInput(code="202502")).success is True
        assert run(WeekRangeInput(fiscal_year=2025, week=2)).success is True
        assert run(FiscalLookupInput(date="2024-07-06")).success is True

    def test_unknown_input_raises(self) -> None:
        with pytest.raises(ValueError):
            run("202501")  # type: ignore[arg-type]
