"""
Inspection numbering component - sequential inspection numbers.

Invariants:
- Numbers sharing a prefix never repeat once recorded
- Running number restarts at 1 for each station and calendar day
"""

from __future__ import annotations

from src.components.fiscal_calendar import FiscalCalendarError

from ._impl import InspectionNumberService
from .models import (
    GenerateNumberInput,
    GenerateNumberOutput,
    InspectionNumberConfig,
    InspectionNumberError,
    NumberingValidationError,
)
from .ports import ClockPort, InspectionNumberRepoPort, RulesPort


def _build_config(rules: RulesPort | None) -> InspectionNumberConfig:
    """Build numbering config from rules port."""
    if rules is None:
        return InspectionNumberConfig()

    return InspectionNumberConfig(
        running_digits=rules.get_running_digits(),
        week_start_day=rules.get_week_start_day(),
        allowed_stations=rules.get_allowed_stations(),
        restrict_stations=rules.get_restrict_stations(),
    )


def _field_for(exc: Exception) -> str | None:
    if isinstance(exc, FiscalCalendarError):
        return "date"
    return {
        "invalid_station": "station",
        "invalid_work_week": "week",
    }.get(getattr(exc, "code", ""), None)


# --- Component Entry Points ---


def run_generate(
    inp: GenerateNumberInput,
    *,
    repo: InspectionNumberRepoPort,
    clock: ClockPort | None = None,
    rules: RulesPort | None = None,
) -> GenerateNumberOutput:
    """
    Generate the next inspection number for a station and date.

    Args:
        inp: Input containing station, optional date and work week.
        repo: Issued inspection number repository port.
        clock: Optional clock used when no date is given.
        rules: Optional rules port for configuration.

    Returns:
        GenerateNumberOutput with the issued number or errors.
    """
    service = InspectionNumberService(repo=repo, clock=clock, config=_build_config(rules))

    try:
        if inp.reserve:
            issued = service.issue(inp.station, inp.date, inp.week)
        else:
            issued = service.next_number(inp.station, inp.date, inp.week)
    except (InspectionNumberError, FiscalCalendarError) as e:
        return GenerateNumberOutput(
            issued=None,
            errors=[
                NumberingValidationError(
                    code=e.code,
                    message=str(e),
                    field=_field_for(e),
                )
            ],
            success=False,
        )

    return GenerateNumberOutput(issued=issued)


def run(
    inp: GenerateNumberInput,
    *,
    repo: InspectionNumberRepoPort,
    clock: ClockPort | None = None,
    rules: RulesPort | None = None,
) -> GenerateNumberOutput:
    """Main entry point for the inspection numbering component."""
    if isinstance(inp, GenerateNumberInput):
        return run_generate(inp, repo=repo, clock=clock, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
