"""
Fiscal calendar component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Clock used by the current-week helpers."""

    def now(self) -> datetime:
        """Return current local time."""
        ...


class RulesPort(Protocol):
    """Port for fiscal calendar rules configuration."""

    def get_week_start_day(self) -> int:
        """Get the weekday fiscal weeks start on (0=Sunday, 6=Saturday)."""
        ...

    def get_strict_week_numbers(self) -> bool:
        """Get whether out-of-range week numbers raise instead of clamping."""
        ...
