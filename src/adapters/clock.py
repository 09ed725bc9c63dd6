"""
Clock adapters for the current-week helpers and inspection numbering.

now() returns plant-local time; the calendar date of that value decides the
fiscal week.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo


class SystemClock:
    """Wall clock, optionally pinned to an IANA timezone."""

    def __init__(self, tz_name: str | None = None) -> None:
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name) if tz_name else None

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now()
        return datetime.now(self._tz)

    @property
    def timezone_name(self) -> str | None:
        return self._tz_name


class FrozenClock:
    """
    Clock that returns a fixed time.

    Useful for deterministic testing.
    """

    def __init__(self, frozen: datetime) -> None:
        self._frozen = frozen

    def now(self) -> datetime:
        return self._frozen

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen = self._frozen + delta
