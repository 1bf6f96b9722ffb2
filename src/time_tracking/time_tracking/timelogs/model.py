from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class CheckEvent:
    """A single recorded check time (entrance or exit, told apart only by position)."""

    employee_id: int
    check_time: datetime
    event_id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PresenceSet:
    """Employees inside the building at ``at_time``."""

    at_time: datetime
    employees: list[Employee] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.employees)
