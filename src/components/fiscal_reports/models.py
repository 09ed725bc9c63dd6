"""
Fiscal reports component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.components.fiscal_calendar import FiscalWeekRange

Record = Mapping[str, Any]


# --- Enums ---


class PeriodType(str, Enum):
    """Reporting period granularity."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# --- Buckets ---


@dataclass(frozen=True)
class WeeklyBucket:
    """Records counted within one fiscal week."""

    fiscal_year: int
    week: int
    week_range: FiscalWeekRange
    count: int

    @property
    def code(self) -> str:
        return f"{self.fiscal_year:04d}{self.week:02d}"


@dataclass(frozen=True)
class YearlyBucket:
    """Records counted within one fiscal year."""

    fiscal_year: int
    count: int
    weeks: tuple[int, ...] = ()


@dataclass(frozen=True)
class TrendPoint:
    """A labelled point on a week/month trend chart."""

    key: str  # YYMMWW, or YYMM99 for a month rollup
    label: str
    count: int


# --- Validation Error ---


@dataclass(frozen=True)
class ReportValidationError:
    """Report validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SummaryInput:
    """Input for bucketing records by fiscal period."""

    records: Sequence[Record]
    period: PeriodType = PeriodType.WEEK
    date_field: str = "date"
    fiscal_year: int | None = None


@dataclass(frozen=True)
class FilterOptionsInput:
    """Input for listing fiscal year / work week filter options."""

    records: Sequence[Record]
    fiscal_year: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class SummaryOutput:
    """Output for summary operation."""

    weekly: tuple[WeeklyBucket, ...] = ()
    yearly: tuple[YearlyBucket, ...] = ()
    trend: tuple[TrendPoint, ...] = ()
    errors: list[ReportValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class FilterOptionsOutput:
    """Output for filter options operation."""

    fiscal_years: tuple[str, ...] = ()
    work_weeks: tuple[str, ...] = ()
    errors: list[ReportValidationError] = field(default_factory=list)
    success: bool = True
