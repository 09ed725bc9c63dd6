"""
Fiscal reports component - bucketing records by fiscal week and year.
"""

from ._impl import (
    bucket_by_week,
    bucket_by_year,
    bucket_trend,
    distinct_fiscal_years,
    distinct_work_weeks,
    is_valid_work_week,
    stamp_fiscal_period,
    trend_key,
)
from .component import run, run_filter_options, run_summary
from .models import (
    FilterOptionsInput,
    FilterOptionsOutput,
    PeriodType,
    Record,
    ReportValidationError,
    SummaryInput,
    SummaryOutput,
    TrendPoint,
    WeeklyBucket,
    YearlyBucket,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_filter_options",
    "run_summary",
    # Input models
    "FilterOptionsInput",
    "SummaryInput",
    # Output models
    "FilterOptionsOutput",
    "PeriodType",
    "Record",
    "ReportValidationError",
    "SummaryOutput",
    "TrendPoint",
    "WeeklyBucket",
    "YearlyBucket",
    # Ports
    "RulesPort",
    # _impl re-exports
    "bucket_by_week",
    "bucket_by_year",
    "bucket_trend",
    "distinct_fiscal_years",
    "distinct_work_weeks",
    "is_valid_work_week",
    "stamp_fiscal_period",
    "trend_key",
]
