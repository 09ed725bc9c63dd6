"""
Inspection numbering component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from src.components.fiscal_calendar import DEFAULT_WEEK_START_DAY, DateInput

# --- Configuration ---


@dataclass(frozen=True)
class InspectionNumberConfig:
    """Inspection numbering configuration from rules."""

    running_digits: int = 4
    week_start_day: int = DEFAULT_WEEK_START_DAY
    allowed_stations: tuple[str, ...] = ()
    restrict_stations: bool = False


DEFAULT_CONFIG = InspectionNumberConfig()


# --- Error Types ---


class InspectionNumberError(Exception):
    """Base inspection numbering error."""

    code = "inspection_number_error"


class InvalidStationError(InspectionNumberError):
    """Station code is empty, malformed or not configured."""

    code = "invalid_station"

    def __init__(self, station: str, reason: str) -> None:
        self.station = station
        self.reason = reason
        super().__init__(f"Invalid station '{station}': {reason}")


class InvalidWorkWeekError(InspectionNumberError):
    """Work week override is not a week number."""

    code = "invalid_work_week"

    def __init__(self, week: object) -> None:
        self.week = week
        super().__init__(f"Invalid work week {week!r}: expected 1-52")


class RunningNumberExhaustedError(InspectionNumberError):
    """No running numbers left for the prefix."""

    code = "running_number_exhausted"

    def __init__(self, prefix: str, digits: int) -> None:
        self.prefix = prefix
        self.digits = digits
        super().__init__(f"Running numbers exhausted for prefix '{prefix}' ({digits} digits)")


class DuplicateInspectionNumberError(InspectionNumberError):
    """Inspection number has already been issued."""

    code = "duplicate_inspection_number"

    def __init__(self, inspection_no: str) -> None:
        self.inspection_no = inspection_no
        super().__init__(f"Inspection number '{inspection_no}' has already been issued")


# --- Issued Number ---


@dataclass(frozen=True)
class IssuedInspectionNumber:
    """An inspection number and the parts it was built from."""

    inspection_no: str
    station: str
    prefix: str
    running_number: int
    fiscal_year: int
    week: int
    issued_on: date
    created_at: datetime


# --- Validation Error ---


@dataclass(frozen=True)
class NumberingValidationError:
    """Inspection numbering validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class GenerateNumberInput:
    """Input for generating the next inspection number."""

    station: str
    date: DateInput | None = None
    week: int | str | None = None
    reserve: bool = True


# --- Output Models ---


@dataclass(frozen=True)
class GenerateNumberOutput:
    """Output for generate operation."""

    issued: IssuedInspectionNumber | None
    errors: list[NumberingValidationError] = field(default_factory=list)
    success: bool = True

    @property
    def inspection_no(self) -> str | None:
        return self.issued.inspection_no if self.issued else None
