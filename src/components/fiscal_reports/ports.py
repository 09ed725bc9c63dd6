"""
Fiscal reports component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for reporting rules configuration."""

    def get_week_start_day(self) -> int:
        """Get the weekday fiscal weeks start on (0=Sunday, 6=Saturday)."""
        ...
