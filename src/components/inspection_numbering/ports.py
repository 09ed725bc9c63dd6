"""
Inspection numbering component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import IssuedInspectionNumber


class InspectionNumberRepoPort(Protocol):
    """Repository interface for issued inspection numbers."""

    def list_numbers_with_prefix(self, prefix: str) -> list[str]:
        """List inspection numbers starting with prefix."""
        ...

    def save_number(self, issued: IssuedInspectionNumber) -> IssuedInspectionNumber:
        """Record an issued inspection number.

        Raises DuplicateInspectionNumberError if the number already exists.
        """
        ...


class ClockPort(Protocol):
    """Clock used when no inspection date is given."""

    def now(self) -> datetime:
        """Return current local time."""
        ...


class RulesPort(Protocol):
    """Port for inspection numbering rules configuration."""

    def get_week_start_day(self) -> int:
        """Get the weekday fiscal weeks start on."""
        ...

    def get_running_digits(self) -> int:
        """Get the width of the running number."""
        ...

    def get_allowed_stations(self) -> tuple[str, ...]:
        """Get configured station codes."""
        ...

    def get_restrict_stations(self) -> bool:
        """Get whether stations outside the configured list are rejected."""
        ...
