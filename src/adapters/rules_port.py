"""
Rules adapter - exposes loaded rules through the component RulesPort protocols.
"""

from __future__ import annotations

from src.rules.models import Rules


class RulesPortAdapter:
    """Read-only view of Rules for the fiscal components."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    # fiscal_calendar / fiscal_reports

    def get_week_start_day(self) -> int:
        return self._rules.fiscal.week_start_day

    def get_strict_week_numbers(self) -> bool:
        return self._rules.fiscal.strict_week_numbers

    # inspection_numbering

    def get_running_digits(self) -> int:
        return self._rules.inspection_numbering.running_digits

    def get_allowed_stations(self) -> tuple[str, ...]:
        return tuple(self._rules.inspection_numbering.stations)

    def get_restrict_stations(self) -> bool:
        return self._rules.inspection_numbering.restrict_stations
