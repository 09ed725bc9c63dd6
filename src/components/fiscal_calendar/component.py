"""
Fiscal calendar component - date / fiscal week lookups.

Invariants:
- Week numbers from date lookups are always within 1-52
- Weeks 2-52 span exactly 7 days and advance by 7 days per week
- Bad user input is reported as errors on the output, never raised
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_WEEK_START_DAY,
    MAX_WEEK,
    MIN_WEEK,
    coerce_date,
    fiscal_period,
    fiscal_week,
    fiscal_week_range,
    fiscal_week_to_year_month,
    month_name,
)
from .models import (
    FiscalCalendarError,
    FiscalLookupInput,
    FiscalLookupOutput,
    FiscalValidationError,
    FiscalWeekOutOfRangeError,
    FiscalYearOutOfRangeError,
    InvalidWeekStartDayError,
    WeekRangeInput,
    WeekRangeOutput,
    YearMonthInput,
    YearMonthOutput,
)
from .ports import RulesPort


def _resolve_start_day(explicit: int | None, rules: RulesPort | None) -> int:
    if explicit is not None:
        return explicit
    if rules is not None:
        return rules.get_week_start_day()
    return DEFAULT_WEEK_START_DAY


def _resolve_strict(explicit: bool | None, rules: RulesPort | None) -> bool:
    if explicit is not None:
        return explicit
    if rules is not None:
        return rules.get_strict_week_numbers()
    return False


def _to_error(exc: FiscalCalendarError, field: str | None) -> FiscalValidationError:
    if isinstance(exc, InvalidWeekStartDayError):
        field = "week_start_day"
    elif isinstance(exc, FiscalYearOutOfRangeError) and field == "week":
        field = "fiscal_year"
    return FiscalValidationError(code=exc.code, message=str(exc), field=field)


# --- Component Entry Points ---


def run_lookup(
    inp: FiscalLookupInput,
    *,
    rules: RulesPort | None = None,
) -> FiscalLookupOutput:
    """
    Resolve a date to its fiscal year, week, label and week span.

    Args:
        inp: Input containing the date and optional overrides.
        rules: Optional rules port for week start day and strict mode.

    Returns:
        FiscalLookupOutput with the fiscal week or errors.
    """
    try:
        start_day = _resolve_start_day(inp.week_start_day, rules)
        strict = _resolve_strict(inp.strict, rules)
        day = coerce_date(inp.date)
        week = fiscal_week(day, start_day, strict=strict)
        period = fiscal_period(day, start_day)
        week_range = fiscal_week_range(period.fiscal_year, period.week, start_day)
    except FiscalCalendarError as e:
        return FiscalLookupOutput(fiscal_week=None, errors=[_to_error(e, "date")], success=False)

    return FiscalLookupOutput(
        fiscal_week=week,
        label=week.label(inp.fmt),
        week_range=week_range,
    )


def run_week_range(
    inp: WeekRangeInput,
    *,
    rules: RulesPort | None = None,
) -> WeekRangeOutput:
    """
    Resolve a fiscal year and week to its calendar span.

    The week number is validated here even though the pure function is
    permissive.
    """
    try:
        start_day = _resolve_start_day(inp.week_start_day, rules)
        if not MIN_WEEK <= inp.week <= MAX_WEEK:
            raise FiscalWeekOutOfRangeError(inp.week)
        week_range = fiscal_week_range(inp.fiscal_year, inp.week, start_day)
    except FiscalCalendarError as e:
        return WeekRangeOutput(week_range=None, errors=[_to_error(e, "week")], success=False)

    return WeekRangeOutput(week_range=week_range)


def run_year_month(
    inp: YearMonthInput,
    *,
    rules: RulesPort | None = None,
) -> YearMonthOutput:
    """Convert a YYYYWW code to YYMM plus its month label."""
    try:
        start_day = _resolve_start_day(inp.week_start_day, rules)
        yearmonth = fiscal_week_to_year_month(inp.code, start_day)
    except FiscalCalendarError as e:
        return YearMonthOutput(yearmonth=None, errors=[_to_error(e, "code")], success=False)

    return YearMonthOutput(yearmonth=yearmonth, month_label=month_name(yearmonth))


def run(
    inp: FiscalLookupInput | WeekRangeInput | YearMonthInput,
    *,
    rules: RulesPort | None = None,
) -> FiscalLookupOutput | WeekRangeOutput | YearMonthOutput:
    """
    Main entry point for the fiscal calendar component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, FiscalLookupInput):
        return run_lookup(inp, rules=rules)
    elif isinstance(inp, WeekRangeInput):
        return run_week_range(inp, rules=rules)
    elif isinstance(inp, YearMonthInput):
        return run_year_month(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
