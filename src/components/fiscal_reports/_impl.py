"""
Fiscal reporting helpers - stamping and bucketing records by fiscal period.

Key behaviors:
- Stamp fy / ww string fields onto records from a date field
- Bucket records per fiscal week, per fiscal year, or per week/month trend
- Buckets use fiscal_period(), so late-June week 1 records group with July's week 1
- Filter option lists mirror the report dropdowns (distinct, sorted ascending)
"""

from __future__ import annotations

import re
from collections import Counter, defaultdict
from collections.abc import Iterable
from typing import Any

from src.components.fiscal_calendar import (
    DEFAULT_WEEK_START_DAY,
    FiscalWeek,
    fiscal_period,
    fiscal_week,
    fiscal_week_range,
    fiscal_week_to_year_month,
    month_trend_name,
)

from .models import Record, TrendPoint, WeeklyBucket, YearlyBucket

_WORK_WEEK_RE = re.compile(r"[0-9]{2}")


def _has_date(record: Record, date_field: str) -> bool:
    return record.get(date_field) not in (None, "")


def is_valid_work_week(ww: str) -> bool:
    """Work weeks are two-digit strings, e.g. "07"."""
    return isinstance(ww, str) and _WORK_WEEK_RE.fullmatch(ww) is not None


def stamp_fiscal_period(
    record: Record,
    date_field: str = "date",
    week_start_day: int = DEFAULT_WEEK_START_DAY,
) -> dict[str, Any]:
    """
    Copy of record with "fy" and "ww" derived from its date field.

    Records without a date are copied unchanged.
    """
    stamped = dict(record)
    if not _has_date(record, date_field):
        return stamped

    week = fiscal_week(record[date_field], week_start_day)
    stamped["fy"] = str(week.fiscal_year)
    stamped["ww"] = f"{week.week:02d}"
    return stamped


def _periods(
    records: Iterable[Record], date_field: str, week_start_day: int
) -> list[FiscalWeek]:
    return [
        fiscal_period(r[date_field], week_start_day) for r in records if _has_date(r, date_field)
    ]


def bucket_by_week(
    records: Iterable[Record],
    date_field: str = "date",
    week_start_day: int = DEFAULT_WEEK_START_DAY,
) -> list[WeeklyBucket]:
    """Count records per fiscal week, ordered by fiscal year then week."""
    counts = Counter(_periods(records, date_field, week_start_day))
    return [
        WeeklyBucket(
            fiscal_year=period.fiscal_year,
            week=period.week,
            week_range=fiscal_week_range(period.fiscal_year, period.week, week_start_day),
            count=count,
        )
        for period, count in sorted(
            counts.items(), key=lambda item: (item[0].fiscal_year, item[0].week)
        )
    ]


def bucket_by_year(
    records: Iterable[Record],
    date_field: str = "date",
    week_start_day: int = DEFAULT_WEEK_START_DAY,
) -> list[YearlyBucket]:
    """Count records per fiscal year, listing the weeks that had records."""
    counts: Counter[int] = Counter()
    weeks: defaultdict[int, set[int]] = defaultdict(set)
    for period in _periods(records, date_field, week_start_day):
        counts[period.fiscal_year] += 1
        weeks[period.fiscal_year].add(period.week)

    return [
        YearlyBucket(fiscal_year=fy, count=counts[fy], weeks=tuple(sorted(weeks[fy])))
        for fy in sorted(counts)
    ]


def trend_key(period: FiscalWeek, week_start_day: int = DEFAULT_WEEK_START_DAY) -> str:
    """YYMMWW key: month of the week's start date plus the work week."""
    yearmonth = fiscal_week_to_year_month(period.code, week_start_day)
    return f"{yearmonth}{period.week:02d}"


def bucket_trend(
    records: Iterable[Record],
    date_field: str = "date",
    week_start_day: int = DEFAULT_WEEK_START_DAY,
    *,
    monthly: bool = False,
) -> list[TrendPoint]:
    """
    Count records per trend key for week or month trend charts.

    Month rollups use the YYMM99 key and are labelled with the month only.
    """
    counts: Counter[str] = Counter()
    for period in _periods(records, date_field, week_start_day):
        key = trend_key(period, week_start_day)
        if monthly:
            key = f"{key[:4]}99"
        counts[key] += 1

    # Keys sort chronologically within a century: YY then MM then WW.
    return [
        TrendPoint(key=key, label=month_trend_name(key), count=counts[key])
        for key in sorted(counts)
    ]


def distinct_fiscal_years(records: Iterable[Record]) -> list[str]:
    """Distinct non-empty "fy" values, ascending."""
    return sorted({str(r["fy"]) for r in records if r.get("fy") not in (None, "")})


def distinct_work_weeks(records: Iterable[Record], fy: str | None = None) -> list[str]:
    """
    Distinct non-empty "ww" values, ascending.

    An empty or missing fy means all fiscal years.
    """
    fy_filter = (fy or "").strip()
    return sorted(
        {
            str(r["ww"])
            for r in records
            if r.get("ww") not in (None, "") and (not fy_filter or str(r.get("fy")) == fy_filter)
        }
    )
