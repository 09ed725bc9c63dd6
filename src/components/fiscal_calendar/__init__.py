"""
Fiscal calendar component - fiscal year and work week arithmetic.

Fiscal years anchor on July 1; weeks start on a configurable weekday
(Saturday by default).
"""

from ._impl import (
    DEFAULT_WEEK_START_DAY,
    MAX_WEEK,
    MIN_WEEK,
    coerce_date,
    current_fiscal_week,
    current_fiscal_year,
    first_start_weekday_on_or_after,
    fiscal_period,
    fiscal_week,
    fiscal_week_number,
    fiscal_week_range,
    fiscal_week_to_year_month,
    fiscal_year,
    fiscal_year_anchor,
    format_fiscal_week,
    js_weekday,
    last_start_weekday_of_june,
    month_name,
    month_trend_name,
    parse_fiscal_week_code,
    validate_week_start_day,
    week_range_containing,
)
from .component import run, run_lookup, run_week_range, run_year_month
from .models import (
    DateInput,
    FiscalCalendarError,
    FiscalLookupInput,
    FiscalLookupOutput,
    FiscalValidationError,
    FiscalWeek,
    FiscalWeekOutOfRangeError,
    FiscalWeekRange,
    FiscalYearOutOfRangeError,
    InvalidDateError,
    InvalidFiscalWeekFormatError,
    InvalidWeekStartDayError,
    WeekFormat,
    WeekRangeInput,
    WeekRangeOutput,
    YearMonthInput,
    YearMonthOutput,
)
from .ports import ClockPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_lookup",
    "run_week_range",
    "run_year_month",
    # Input models
    "FiscalLookupInput",
    "WeekRangeInput",
    "YearMonthInput",
    # Output models
    "FiscalLookupOutput",
    "FiscalValidationError",
    "WeekRangeOutput",
    "YearMonthOutput",
    # Value types
    "DateInput",
    "FiscalWeek",
    "FiscalWeekRange",
    "WeekFormat",
    # Errors
    "FiscalCalendarError",
    "FiscalWeekOutOfRangeError",
    "FiscalYearOutOfRangeError",
    "InvalidDateError",
    "InvalidFiscalWeekFormatError",
    "InvalidWeekStartDayError",
    # Ports
    "ClockPort",
    "RulesPort",
    # Pure functions
    "DEFAULT_WEEK_START_DAY",
    "MAX_WEEK",
    "MIN_WEEK",
    "coerce_date",
    "current_fiscal_week",
    "current_fiscal_year",
    "first_start_weekday_on_or_after",
    "fiscal_period",
    "fiscal_week",
    "fiscal_week_number",
    "fiscal_week_range",
    "fiscal_week_to_year_month",
    "fiscal_year",
    "fiscal_year_anchor",
    "format_fiscal_week",
    "js_weekday",
    "last_start_weekday_of_june",
    "month_name",
    "month_trend_name",
    "parse_fiscal_week_code",
    "validate_week_start_day",
    "week_range_containing",
]
