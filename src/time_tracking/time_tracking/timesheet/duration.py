"""Worked-time formatting.

Durations travel through the engine as ``timedelta`` or whole minutes; the
``HH:MM`` / ``H:MM`` strings only exist at the output boundary.
Totals are summed as integer minutes, never by re-reading formatted strings.
"""

from __future__ import annotations

from datetime import timedelta

from ..core.constants import DAILY_HOURS_FORMAT, TOTAL_HOURS_FORMAT
from ..core.exceptions import MalformedInputError


def minutes_of(delta: timedelta) -> int:
    """Whole minutes in ``delta``; leftover seconds are dropped."""
    if delta < timedelta(0):
        raise MalformedInputError(f"negative duration: {delta}")
    return int(delta.total_seconds()) // 60


def _split(minutes: int) -> dict:
    if minutes < 0:
        raise MalformedInputError(f"negative minutes: {minutes}")
    return {"hours": minutes // 60, "minutes": minutes % 60}


def format_daily_hours(minutes: int) -> str:
    return DAILY_HOURS_FORMAT.format(**_split(minutes))


def format_total_hours(minutes: int) -> str:
    return TOTAL_HOURS_FORMAT.format(**_split(minutes))

