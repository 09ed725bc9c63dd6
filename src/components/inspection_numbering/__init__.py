"""
Inspection numbering component - {station}{FY}{MM}{WW}-{DD}{RRRR} numbers.
"""

from ._impl import (
    MAX_ISSUE_ATTEMPTS,
    InMemoryInspectionNumberRepo,
    InspectionNumberService,
    build_prefix,
    create_inspection_number_service,
    format_inspection_number,
    next_running_number,
    parse_running_number,
    resolve_work_week,
    validate_station,
)
from .component import run, run_generate
from .models import (
    GenerateNumberInput,
    DuplicateInspectionNumberError,
    GenerateNumberOutput,
    InspectionNumberConfig,
    InspectionNumberError,
    InvalidStationError,
    InvalidWorkWeekError,
    IssuedInspectionNumber,
    NumberingValidationError,
    RunningNumberExhaustedError,
)
from .ports import ClockPort, InspectionNumberRepoPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_generate",
    # Input models
    "GenerateNumberInput",
    # Output models
    "GenerateNumberOutput",
    "IssuedInspectionNumber",
    "NumberingValidationError",
    # Errors
    "DuplicateInspectionNumberError",
    "InspectionNumberError",
    "InvalidStationError",
    "InvalidWorkWeekError",
    "RunningNumberExhaustedError",
    # Ports
    "ClockPort",
    "InspectionNumberRepoPort",
    "RulesPort",
    # _impl re-exports
    "MAX_ISSUE_ATTEMPTS",
    "InMemoryInspectionNumberRepo",
    "InspectionNumberConfig",
    "InspectionNumberService",
    "build_prefix",
    "create_inspection_number_service",
    "format_inspection_number",
    "next_running_number",
    "parse_running_number",
    "resolve_work_week",
    "validate_station",
]
