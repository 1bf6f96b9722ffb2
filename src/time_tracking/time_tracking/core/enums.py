from __future__ import annotations

from enum import Enum


class PresenceState(str, Enum):
    """Whether an employee is inside the building, derived from event parity."""

    OUT = "OUT"
    IN = "IN"

    def toggled(self) -> "PresenceState":
        return PresenceState.IN if self is PresenceState.OUT else PresenceState.OUT
