"""Fiscal calendar routes: week lookups, week spans and month codes."""

from typing import Any, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.clock import SystemClock
from src.adapters.rules_port import RulesPortAdapter
from src.api.deps import get_clock, get_rules_port
from src.api.schemas import (
    ApiResponse,
    FilterOptionsRequest,
    FiscalWeekModel,
    SummaryRequest,
    WeekFormat,
    WeekRangeModel,
    YearMonthModel,
)
from src.components.fiscal_calendar import (
    FiscalLookupInput,
    FiscalWeekRange,
    FiscalValidationError,
    WeekRangeInput,
    YearMonthInput,
    run_lookup,
    run_week_range,
    run_year_month,
)
from src.components.fiscal_reports import (
    FilterOptionsInput,
    PeriodType,
    SummaryInput,
    run_filter_options,
    run_summary,
)

router = APIRouter()


def _range_model(week_range: FiscalWeekRange) -> WeekRangeModel:
    return WeekRangeModel(start=week_range.start, end=week_range.end, days=week_range.days)


def _raise_errors(errors: list[Any]) -> NoReturn:
    first: FiscalValidationError = errors[0]
    raise HTTPException(
        status_code=400,
        detail={"code": first.code, "message": first.message, "field": first.field},
    )


# --- Routes ---


@router.get("/week", response_model=ApiResponse)
def get_fiscal_week(
    date: str = Query(..., description="ISO date, e.g. 2025-01-15"),
    start_day: int | None = Query(None, description="0=Sunday ... 6=Saturday"),
    fmt: WeekFormat = "YYYY-WW",
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> ApiResponse:
    """Fiscal year, work week and week span for a date."""
    result = run_lookup(
        FiscalLookupInput(date=date, week_start_day=start_day, fmt=fmt), rules=rules
    )
    if not result.success or result.fiscal_week is None:
        _raise_errors(result.errors)

    week = result.fiscal_week
    return ApiResponse(
        data=FiscalWeekModel(
            fy=week.fiscal_year,
            ww=week.week,
            code=week.code,
            label=result.label or week.label(fmt),
            range=_range_model(result.week_range) if result.week_range else None,
        )
    )


@router.get("/range", response_model=ApiResponse)
def get_week_range(
    fy: int,
    week: int,
    start_day: int | None = None,
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> ApiResponse:
    """Calendar start and end date of a fiscal week."""
    result = run_week_range(
        WeekRangeInput(fiscal_year=fy, week=week, week_start_day=start_day), rules=rules
    )
    if not result.success or result.week_range is None:
        _raise_errors(result.errors)

    return ApiResponse(data=_range_model(result.week_range))


@router.get("/year-month/{code}", response_model=ApiResponse)
def get_year_month(
    code: str,
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> ApiResponse:
    """Convert a YYYYWW code to the YYMM of its start date."""
    result = run_year_month(YearMonthInput(code=code), rules=rules)
    if not result.success or result.yearmonth is None:
        _raise_errors(result.errors)

    return ApiResponse(
        data=YearMonthModel(yearmonth=result.yearmonth, label=result.month_label or "")
    )


@router.get("/current", response_model=ApiResponse)
def get_current_week(
    rules: RulesPortAdapter = Depends(get_rules_port),
    clock: SystemClock = Depends(get_clock),
) -> ApiResponse:
    """Fiscal week for today's date on the server clock."""
    today = clock.now().date()
    result = run_lookup(FiscalLookupInput(date=today), rules=rules)
    if not result.success or result.fiscal_week is None:
        _raise_errors(result.errors)

    week = result.fiscal_week
    return ApiResponse(
        data=FiscalWeekModel(
            fy=week.fiscal_year,
            ww=week.week,
            code=week.code,
            label=result.label or week.label(),
            range=_range_model(result.week_range) if result.week_range else None,
        ),
        message=f"Today is {today.isoformat()}",
    )


@router.post("/summary", response_model=ApiResponse)
def summarize_records(
    body: SummaryRequest,
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> ApiResponse:
    """Count records per fiscal week, month trend point or fiscal year."""
    result = run_summary(
        SummaryInput(
            records=body.records,
            period=PeriodType(body.period),
            date_field=body.date_field,
            fiscal_year=body.fy,
        ),
        rules=rules,
    )
    if not result.success:
        _raise_errors(result.errors)

    return ApiResponse(
        data={
            "weekly": [
                {
                    "fy": b.fiscal_year,
                    "ww": b.week,
                    "code": b.code,
                    "start": b.week_range.start.isoformat(),
                    "end": b.week_range.end.isoformat(),
                    "count": b.count,
                }
                for b in result.weekly
            ],
            "yearly": [
                {"fy": b.fiscal_year, "count": b.count, "weeks": list(b.weeks)}
                for b in result.yearly
            ],
            "trend": [{"key": p.key, "label": p.label, "count": p.count} for p in result.trend],
        }
    )


@router.post("/filter-options", response_model=ApiResponse)
def get_filter_options(body: FilterOptionsRequest) -> ApiResponse:
    """Distinct fiscal years and work weeks for report filter dropdowns."""
    result = run_filter_options(FilterOptionsInput(records=body.records, fiscal_year=body.fy))
    return ApiResponse(
        data={"fiscal_years": list(result.fiscal_years), "work_weeks": list(result.work_weeks)}
    )
