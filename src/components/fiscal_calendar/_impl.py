"""
Fiscal calendar - calendar date to fiscal year / work week conversion.

Key behaviors:
- Fiscal year anchors on July 1 and is named after the calendar year it ends in
- Weeks start on a configurable weekday (0=Sunday ... 6=Saturday, default Saturday)
- Week 1 is the partial week running from the last start weekday of June
  through the day before the first start weekday on/after July 1
- Week 2 starts on that first start weekday; each later week is 7 days on
- Forward lookups (date -> week) clamp into 1-52
- Reverse lookups (YYYYWW -> date) validate and raise

Late-June dates inside week 1 report the calendar year they fall in as their
fiscal year; fiscal_period() attributes them to the fiscal year week 1 opens.
"""

from __future__ import annotations

import logging
import re
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta

from .models import (
    DateInput,
    FiscalWeek,
    FiscalWeekOutOfRangeError,
    FiscalWeekRange,
    FiscalYearOutOfRangeError,
    InvalidDateError,
    InvalidFiscalWeekFormatError,
    InvalidWeekStartDayError,
    WeekFormat,
)
from .ports import ClockPort

logger = logging.getLogger(__name__)

# --- Constants ---

DEFAULT_WEEK_START_DAY = 6  # Saturday
FISCAL_ANCHOR_MONTH = 7  # July
MIN_WEEK = 1
MAX_WEEK = 52
MONTH_ROLLUP_WEEK = "99"

# Week 1 of a fiscal year opens in the June before it
MIN_FISCAL_YEAR = MINYEAR + 1
MAX_FISCAL_YEAR = MAXYEAR

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_WEEK_CODE_RE = re.compile(r"[0-9]{6}")


# --- Normalisation ---


def coerce_date(value: DateInput) -> date:
    """
    Normalise a date input to a calendar date.

    datetime values keep their own calendar date (no timezone shift).
    Strings must be ISO formatted, e.g. "2024-07-15" or "2024-07-15T08:30:00".
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError(value)
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise InvalidDateError(value) from None
    raise InvalidDateError(value)


def validate_week_start_day(start_day: int) -> int:
    """Return start_day if it is a weekday index 0-6."""
    if isinstance(start_day, bool) or not isinstance(start_day, int):
        raise InvalidWeekStartDayError(start_day)
    if not 0 <= start_day <= 6:
        raise InvalidWeekStartDayError(start_day)
    return start_day


def js_weekday(day: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


# --- Anchors ---


def first_start_weekday_on_or_after(day: date, start_day: int = DEFAULT_WEEK_START_DAY) -> date:
    """First occurrence of start_day on or after day."""
    return day + timedelta(days=(start_day - js_weekday(day)) % 7)


def last_start_weekday_of_june(year: int, start_day: int = DEFAULT_WEEK_START_DAY) -> date:
    """Last occurrence of start_day on or before June 30 of year."""
    june_30 = date(year, 6, 30)
    return june_30 - timedelta(days=(js_weekday(june_30) - start_day) % 7)


def fiscal_year_anchor(fiscal_year: int) -> date:
    """July 1 that opens the given fiscal year."""
    if not MIN_FISCAL_YEAR <= fiscal_year <= MAX_FISCAL_YEAR:
        raise FiscalYearOutOfRangeError(fiscal_year)
    return date(fiscal_year - 1, FISCAL_ANCHOR_MONTH, 1)


def _in_june_week_one(day: date, start_day: int) -> bool:
    return day.month == 6 and day >= last_start_weekday_of_june(day.year, start_day)


# --- Forward Lookups ---


def fiscal_week_number(
    value: DateInput,
    fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY,
    *,
    strict: bool = False,
) -> int:
    """
    Fiscal week number (1-52) for a date.

    Args:
        value: Date, datetime or ISO date string.
        fiscal_year_start_day: Weekday weeks start on (0=Sunday, 6=Saturday).
        strict: Raise FiscalWeekOutOfRangeError instead of clamping.

    Returns:
        Week number clamped into 1-52.
    """
    start_day = validate_week_start_day(fiscal_year_start_day)
    day = coerce_date(value)

    if _in_june_week_one(day, start_day):
        return MIN_WEEK

    anchor_year = day.year if day.month >= FISCAL_ANCHOR_MONTH else day.year - 1
    first_start = first_start_weekday_on_or_after(fiscal_year_anchor(anchor_year + 1), start_day)

    if day < first_start:
        return MIN_WEEK

    week = (day - first_start).days // 7 + 2

    if week > MAX_WEEK:
        if strict:
            raise FiscalWeekOutOfRangeError(week)
        return MAX_WEEK
    return week


def fiscal_year(value: DateInput, fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY) -> int:
    """
    Fiscal year for a date.

    July onwards belongs to the fiscal year ending next calendar year. Dates on
    or after the last start weekday of June report the current calendar year.
    """
    start_day = validate_week_start_day(fiscal_year_start_day)
    day = coerce_date(value)

    if _in_june_week_one(day, start_day):
        return day.year

    if day.month >= FISCAL_ANCHOR_MONTH:
        return day.year + 1
    return day.year


def fiscal_week(
    value: DateInput,
    fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY,
    *,
    strict: bool = False,
) -> FiscalWeek:
    """Fiscal year and week for a date as a single value."""
    return FiscalWeek(
        fiscal_year=fiscal_year(value, fiscal_year_start_day),
        week=fiscal_week_number(value, fiscal_year_start_day, strict=strict),
    )


def format_fiscal_week(
    value: DateInput,
    fmt: WeekFormat = "YYYY-WW",
    fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY,
) -> str:
    """Format a date as "2025-03" or "2025 Week 03"."""
    return fiscal_week(value, fiscal_year_start_day).label(fmt)


def current_fiscal_week(
    clock: ClockPort, fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY
) -> int:
    return fiscal_week_number(clock.now(), fiscal_year_start_day)


def current_fiscal_year(
    clock: ClockPort, fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY
) -> int:
    return fiscal_year(clock.now(), fiscal_year_start_day)


# --- Reverse Lookups ---


def fiscal_week_range(
    fiscal_year: int,
    week_number: int,
    fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY,
) -> FiscalWeekRange:
    """
    Calendar span of a fiscal week.

    Week 1 runs from the last start weekday of the preceding June up to the
    day before the first start weekday on/after July 1. Later weeks are
    7 days each. Week numbers are not range checked here, but a week whose
    span falls outside the calendar raises FiscalWeekOutOfRangeError.

    Raises:
        FiscalYearOutOfRangeError: Fiscal year has no representable July 1.
    """
    start_day = validate_week_start_day(fiscal_year_start_day)
    first_start = first_start_weekday_on_or_after(fiscal_year_anchor(fiscal_year), start_day)

    if week_number == 1:
        return FiscalWeekRange(
            start=last_start_weekday_of_june(fiscal_year - 1, start_day),
            end=first_start - timedelta(days=1),
        )

    try:
        start = first_start + timedelta(weeks=week_number - 2)
        end = start + timedelta(days=6)
    except OverflowError:
        raise FiscalWeekOutOfRangeError(week_number) from None
    return FiscalWeekRange(start=start, end=end)


def fiscal_period(
    value: DateInput, fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY
) -> FiscalWeek:
    """
    Fiscal week whose range holds the date.

    Same as fiscal_week() except late-June week 1 dates are attributed to the
    fiscal year that week 1 opens, so grouping by the result never mixes them
    with the previous year's week 1.
    """
    day = coerce_date(value)
    week = fiscal_week(day, fiscal_year_start_day)
    if week.week == MIN_WEEK and day.month == 6:
        return FiscalWeek(fiscal_year=week.fiscal_year + 1, week=MIN_WEEK)
    return week


def week_range_containing(
    value: DateInput, fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY
) -> FiscalWeekRange:
    """
    Calendar span of the fiscal week a date falls in.

    Dates clamped to week 52 get the span of week 52.
    """
    period = fiscal_period(value, fiscal_year_start_day)
    return fiscal_week_range(period.fiscal_year, period.week, fiscal_year_start_day)


def parse_fiscal_week_code(code: str) -> FiscalWeek:
    """
    Parse a YYYYWW code such as "202401".

    Raises:
        InvalidFiscalWeekFormatError: Not six characters, or not numeric,
            or a year outside the supported calendar.
        FiscalWeekOutOfRangeError: Week outside 1-52.
    """
    if not isinstance(code, str) or len(code) != 6:
        raise InvalidFiscalWeekFormatError(code, 'expected YYYYWW (e.g., "202401")')
    if not _WEEK_CODE_RE.fullmatch(code):
        raise InvalidFiscalWeekFormatError(code, "year and week must be numbers")

    year = int(code[:4])
    if not MIN_FISCAL_YEAR <= year <= MAX_FISCAL_YEAR:
        raise InvalidFiscalWeekFormatError(code, f"year must be {MIN_FISCAL_YEAR} or later")

    week = int(code[4:])
    if not MIN_WEEK <= week <= MAX_WEEK:
        raise FiscalWeekOutOfRangeError(week)

    return FiscalWeek(fiscal_year=year, week=week)


def fiscal_week_to_year_month(
    code: str, fiscal_year_start_day: int = DEFAULT_WEEK_START_DAY
) -> str:
    """
    Convert a YYYYWW fiscal week code to the YYMM of the week's start date.

    Example: "202501" -> "2406" (week 1 of FY2025 starts in late June 2024).
    """
    parsed = parse_fiscal_week_code(code)
    start = fiscal_week_range(parsed.fiscal_year, parsed.week, fiscal_year_start_day).start
    return f"{start.year % 100:02d}{start.month:02d}"


# --- Month Labels ---


def month_name(yearmonth: str | int) -> str:
    """
    Convert YYMM to an abbreviated month label, e.g. "2406" -> "Jun`24".

    Invalid input is returned unchanged.
    """
    text = str(yearmonth)
    if len(text) != 4 or not text.isdigit():
        logger.warning("Invalid yearmonth format: %s. Expected YYMM format.", yearmonth)
        return text

    month_index = int(text[2:]) - 1
    if not 0 <= month_index <= 11:
        logger.warning("Invalid month in yearmonth: %s. Month should be 01-12.", yearmonth)
        return text

    return f"{MONTH_ABBREVIATIONS[month_index]}`{text[:2]}"


def month_trend_name(yearmonth_week: str = "") -> str:
    """
    Label a YYMMWW trend key.

    "250112" -> "WW12 Jan`25"; a week part of "99" marks a month rollup,
    so "240699" -> "Jun`24".
    """
    week_part = yearmonth_week[-2:]
    label = month_name(yearmonth_week[:4])
    if week_part == MONTH_ROLLUP_WEEK:
        return label
    return f"WW{week_part} {label}"
