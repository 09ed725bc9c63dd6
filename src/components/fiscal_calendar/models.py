"""
Fiscal calendar component input/output models.

Weekday indexes use Sunday as 0 and Saturday as 6.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Literal

# --- Date Input Type ---


# ISO strings are parsed explicitly; anything unparseable raises InvalidDateError.
DateInput = date | datetime | str

WeekFormat = Literal["YYYY-WW", "YYYY Week WW"]


# --- Error Types ---


class FiscalCalendarError(ValueError):
    """Base fiscal calendar error."""

    code = "fiscal_calendar_error"


class InvalidFiscalWeekFormatError(FiscalCalendarError):
    """Fiscal year-week code is not a YYYYWW string."""

    code = "invalid_format"

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid fiscal year week format {value!r}: {reason}")


class FiscalWeekOutOfRangeError(FiscalCalendarError):
    """Week number outside 1-52."""

    code = "week_out_of_range"

    def __init__(self, week: int) -> None:
        self.week = week
        super().__init__(f"Week number must be between 1 and 52, got {week}")


class FiscalYearOutOfRangeError(FiscalCalendarError):
    """Fiscal year whose weeks fall outside the supported calendar."""

    code = "fiscal_year_out_of_range"

    def __init__(self, fiscal_year: int) -> None:
        self.fiscal_year = fiscal_year
        super().__init__(f"Fiscal year {fiscal_year} is outside the supported calendar range")


class InvalidDateError(FiscalCalendarError):
    """Date input could not be normalised to a calendar date."""

    code = "invalid_date"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected a date or ISO date string")


class InvalidWeekStartDayError(FiscalCalendarError):
    """Week start day outside 0 (Sunday) to 6 (Saturday)."""

    code = "invalid_week_start_day"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Week start day must be 0 (Sunday) to 6 (Saturday), got {value!r}")


# --- Value Types ---


@dataclass(frozen=True)
class FiscalWeekRange:
    """Calendar span of one fiscal week (inclusive on both ends)."""

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def dates(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range(self.days)]


@dataclass(frozen=True)
class FiscalWeek:
    """A fiscal year / work week pair."""

    fiscal_year: int
    week: int

    @property
    def code(self) -> str:
        """YYYYWW code, e.g. 202503."""
        return f"{self.fiscal_year:04d}{self.week:02d}"

    def label(self, fmt: WeekFormat = "YYYY-WW") -> str:
        if fmt == "YYYY Week WW":
            return f"{self.fiscal_year} Week {self.week:02d}"
        return f"{self.fiscal_year}-{self.week:02d}"


# --- Validation Error ---


@dataclass(frozen=True)
class FiscalValidationError:
    """Fiscal calendar validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FiscalLookupInput:
    """Input for resolving a date to its fiscal year and week."""

    date: DateInput
    week_start_day: int | None = None
    strict: bool | None = None
    fmt: WeekFormat = "YYYY-WW"


@dataclass(frozen=True)
class WeekRangeInput:
    """Input for resolving a fiscal week to its calendar span."""

    fiscal_year: int
    week: int
    week_start_day: int | None = None


@dataclass(frozen=True)
class YearMonthInput:
    """Input for converting a YYYYWW code to YYMM."""

    code: str
    week_start_day: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class FiscalLookupOutput:
    """Output for date lookup."""

    fiscal_week: FiscalWeek | None
    label: str | None = None
    week_range: FiscalWeekRange | None = None
    errors: list[FiscalValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class WeekRangeOutput:
    """Output for week range lookup."""

    week_range: FiscalWeekRange | None
    errors: list[FiscalValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class YearMonthOutput:
    """Output for YYYYWW to YYMM conversion."""

    yearmonth: str | None
    month_label: str | None = None
    errors: list[FiscalValidationError] = field(default_factory=list)
    success: bool = True
