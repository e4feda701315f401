"""Time-related helpers."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo


def clock_for(timezone: str) -> Callable[[], date]:
    """Return a zero-argument callable yielding today's date in ``timezone``."""

    zone = ZoneInfo(timezone)

    def today() -> date:
        return datetime.now(zone).date()

    return today


__all__ = ["clock_for"]
