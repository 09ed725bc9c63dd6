"""
Fiscal reports component - record summaries by fiscal period.

Invariants:
- Every dated record lands in exactly one bucket
- Buckets are ordered chronologically
- Records with unparseable dates fail the whole summary
"""

from __future__ import annotations

from src.components.fiscal_calendar import DEFAULT_WEEK_START_DAY, FiscalCalendarError

from ._impl import (
    bucket_by_week,
    bucket_by_year,
    bucket_trend,
    distinct_fiscal_years,
    distinct_work_weeks,
)
from .models import (
    FilterOptionsInput,
    FilterOptionsOutput,
    PeriodType,
    ReportValidationError,
    SummaryInput,
    SummaryOutput,
)
from .ports import RulesPort


def _week_start_day(rules: RulesPort | None) -> int:
    if rules is None:
        return DEFAULT_WEEK_START_DAY
    return rules.get_week_start_day()


# --- Component Entry Points ---


def run_summary(
    inp: SummaryInput,
    *,
    rules: RulesPort | None = None,
) -> SummaryOutput:
    """
    Bucket records by fiscal week, year or month trend.

    Args:
        inp: Records, period type, date field and optional fiscal year filter.
        rules: Optional rules port for week start day.

    Returns:
        SummaryOutput with the buckets for the requested period.
    """
    start_day = _week_start_day(rules)

    try:
        if inp.period == PeriodType.YEAR:
            yearly = bucket_by_year(inp.records, inp.date_field, start_day)
            if inp.fiscal_year is not None:
                yearly = [b for b in yearly if b.fiscal_year == inp.fiscal_year]
            return SummaryOutput(yearly=tuple(yearly))

        if inp.period == PeriodType.MONTH:
            trend = bucket_trend(inp.records, inp.date_field, start_day, monthly=True)
            return SummaryOutput(trend=tuple(trend))

        weekly = bucket_by_week(inp.records, inp.date_field, start_day)
        if inp.fiscal_year is not None:
            weekly = [b for b in weekly if b.fiscal_year == inp.fiscal_year]
        trend = bucket_trend(inp.records, inp.date_field, start_day)
        return SummaryOutput(weekly=tuple(weekly), trend=tuple(trend))

    except FiscalCalendarError as e:
        return SummaryOutput(
            errors=[ReportValidationError(code=e.code, message=str(e), field=inp.date_field)],
            success=False,
        )


def run_filter_options(inp: FilterOptionsInput) -> FilterOptionsOutput:
    """List fiscal years and work weeks present in stamped records."""
    return FilterOptionsOutput(
        fiscal_years=tuple(distinct_fiscal_years(inp.records)),
        work_weeks=tuple(distinct_work_weeks(inp.records, inp.fiscal_year)),
    )


def run(
    inp: SummaryInput | FilterOptionsInput,
    *,
    rules: RulesPort | None = None,
) -> SummaryOutput | FilterOptionsOutput:
    """
    Main entry point for the fiscal reports component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SummaryInput):
        return run_summary(inp, rules=rules)
    elif isinstance(inp, FilterOptionsInput):
        return run_filter_options(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
