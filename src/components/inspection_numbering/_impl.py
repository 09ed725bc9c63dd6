"""
InspectionNumberService - sequential inspection number generation.

Number layout: {station}{FY}{MM}{WW}-{DD}{RRRR}
- FY: last two digits of the fiscal year of the inspection date
- MM / DD: calendar month and day of the inspection date
- WW: fiscal work week, two digits
- RRRR: running number, zero padded

Key behaviors:
- Running number is max(existing for the prefix) + 1, so it restarts daily
- Malformed running suffixes in stored numbers are ignored
- Example: OQA250131-300001, OQA250131-300002, OQA250131-310001
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime

from src.components.fiscal_calendar import (
    DEFAULT_WEEK_START_DAY,
    DateInput,
    coerce_date,
    fiscal_week_number,
    fiscal_year,
)

from .models import (
    DEFAULT_CONFIG,
    DuplicateInspectionNumberError,
    InspectionNumberConfig,
    InvalidStationError,
    InvalidWorkWeekError,
    IssuedInspectionNumber,
    RunningNumberExhaustedError,
)
from .ports import ClockPort, InspectionNumberRepoPort

logger = logging.getLogger(__name__)

_STATION_RE = re.compile(r"[A-Za-z0-9]+")

# Concurrent issuers can race for the same running number
MAX_ISSUE_ATTEMPTS = 5


# --- Pure Functions ---


def validate_station(station: str, config: InspectionNumberConfig = DEFAULT_CONFIG) -> str:
    """Return the trimmed station code or raise InvalidStationError."""
    code = (station or "").strip()
    if not code:
        raise InvalidStationError(station, "station is required")
    if not _STATION_RE.fullmatch(code):
        raise InvalidStationError(station, "station must be letters and digits only")
    if config.restrict_stations and code not in config.allowed_stations:
        raise InvalidStationError(station, "station is not configured")
    return code


def resolve_work_week(
    day: date, week: int | str | None, week_start_day: int = DEFAULT_WEEK_START_DAY
) -> int:
    """Use the given work week, or the fiscal week of day when none is given."""
    if week is None or week == "":
        return fiscal_week_number(day, week_start_day)

    if isinstance(week, bool):
        raise InvalidWorkWeekError(week)
    if isinstance(week, str):
        if not week.strip().isdigit():
            raise InvalidWorkWeekError(week)
        week = int(week.strip())
    if not 1 <= week <= 52:
        raise InvalidWorkWeekError(week)
    return week


def build_prefix(
    station: str,
    value: DateInput,
    week: int | str | None = None,
    week_start_day: int = DEFAULT_WEEK_START_DAY,
) -> str:
    """Build the {station}{FY}{MM}{WW}-{DD} prefix for a date."""
    day = coerce_date(value)
    ww = resolve_work_week(day, week, week_start_day)
    fy = fiscal_year(day, week_start_day) % 100
    return f"{station}{fy:02d}{day.month:02d}{ww:02d}-{day.day:02d}"


def parse_running_number(inspection_no: str, digits: int = 4) -> int | None:
    """Running number from the last `digits` characters, or None if not numeric."""
    suffix = inspection_no[-digits:]
    if len(suffix) != digits or not suffix.isdigit():
        return None
    return int(suffix)


def next_running_number(existing: Iterable[str], digits: int = 4) -> int:
    """One past the highest running number in existing, starting at 1."""
    highest = 0
    for inspection_no in existing:
        running = parse_running_number(inspection_no, digits)
        if running is not None and running > highest:
            highest = running
    return highest + 1


def format_inspection_number(prefix: str, running_number: int, digits: int = 4) -> str:
    if running_number >= 10**digits:
        raise RunningNumberExhaustedError(prefix, digits)
    return f"{prefix}{running_number:0{digits}d}"


# --- Service ---


class InspectionNumberService:
    """Generates inspection numbers against a repository of issued numbers."""

    def __init__(
        self,
        repo: InspectionNumberRepoPort,
        clock: ClockPort | None = None,
        config: InspectionNumberConfig = DEFAULT_CONFIG,
    ) -> None:
        self._repo = repo
        self._clock = clock
        self._config = config

    def _now(self) -> datetime:
        if self._clock is not None:
            return self._clock.now()
        return datetime.now()

    def next_number(
        self,
        station: str,
        on: DateInput | None = None,
        week: int | str | None = None,
    ) -> IssuedInspectionNumber:
        """
        Compute the next inspection number without recording it.

        Args:
            station: Station code, e.g. "OQA".
            on: Inspection date (defaults to today).
            week: Work week override (defaults to the fiscal week of the date).

        Returns:
            IssuedInspectionNumber describing the number.
        """
        cfg = self._config
        code = validate_station(station, cfg)
        now = self._now()
        day = coerce_date(on) if on is not None else now.date()

        ww = resolve_work_week(day, week, cfg.week_start_day)
        prefix = build_prefix(code, day, ww, cfg.week_start_day)

        existing = self._repo.list_numbers_with_prefix(prefix)
        running = next_running_number(existing, cfg.running_digits)
        inspection_no = format_inspection_number(prefix, running, cfg.running_digits)

        logger.info(
            "Generated inspection number %s (prefix=%s, existing=%d)",
            inspection_no,
            prefix,
            len(existing),
        )

        return IssuedInspectionNumber(
            inspection_no=inspection_no,
            station=code,
            prefix=prefix,
            running_number=running,
            fiscal_year=fiscal_year(day, cfg.week_start_day),
            week=ww,
            issued_on=day,
            created_at=now,
        )

    def issue(
        self,
        station: str,
        on: DateInput | None = None,
        week: int | str | None = None,
    ) -> IssuedInspectionNumber:
        """
        Compute the next inspection number and record it.

        A number taken by another issuer between the lookup and the save is
        recomputed, up to MAX_ISSUE_ATTEMPTS times.

        Raises:
            DuplicateInspectionNumberError: Every attempt collided.
        """
        for attempt in range(1, MAX_ISSUE_ATTEMPTS):
            issued = self.next_number(station, on, week)
            try:
                return self._repo.save_number(issued)
            except DuplicateInspectionNumberError:
                logger.warning(
                    "Inspection number %s already issued, retrying (attempt %d/%d)",
                    issued.inspection_no,
                    attempt,
                    MAX_ISSUE_ATTEMPTS,
                )

        return self._repo.save_number(self.next_number(station, on, week))


# --- In-Memory Repository ---


class InMemoryInspectionNumberRepo:
    """In-memory issued-number store for testing and local runs."""

    def __init__(self, numbers: Iterable[str] = ()) -> None:
        self._numbers: dict[str, IssuedInspectionNumber | None] = {n: None for n in numbers}

    def list_numbers_with_prefix(self, prefix: str) -> list[str]:
        return sorted((n for n in self._numbers if n.startswith(prefix)), reverse=True)

    def save_number(self, issued: IssuedInspectionNumber) -> IssuedInspectionNumber:
        if issued.inspection_no in self._numbers:
            raise DuplicateInspectionNumberError(issued.inspection_no)
        self._numbers[issued.inspection_no] = issued
        return issued

    def all_numbers(self) -> list[str]:
        return sorted(self._numbers)


def create_inspection_number_service(
    repo: InspectionNumberRepoPort,
    clock: ClockPort | None = None,
    config: InspectionNumberConfig | None = None,
) -> InspectionNumberService:
    """Factory function to create an inspection number service."""
    return InspectionNumberService(repo=repo, clock=clock, config=config or DEFAULT_CONFIG)
