from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import CheckEvent


class EventStore(Protocol):
    """Append-only store of check events.

    Implementations must return each sequence from a single consistent read.
    """

    def create(self, *, employee_id: int, check_time: datetime) -> CheckEvent:
        """Record an event; raises ``ConflictError`` when the employee already has one at ``check_time``."""
        raise NotImplementedError

    def get_by_id(self, event_id: int) -> Optional[CheckEvent]:
        raise NotImplementedError

    def delete_by_id(self, event_id: int) -> bool:
        raise NotImplementedError

    def fetch_for_employee(self, employee_id: int, date_from: datetime, date_to: datetime) -> Sequence[CheckEvent]:
        """Events with ``date_from <= check_time < date_to``, ascending."""
        raise NotImplementedError

    def fetch_all_up_to_time(self, at_time: datetime) -> Sequence[CheckEvent]:
        """Events with ``check_time <= at_time`` ordered by ``(employee_id, check_time)``."""
        raise NotImplementedError

    def fetch_employee_history(self, employee_id: int, at_time: datetime) -> Sequence[CheckEvent]:
        """One employee's events with ``check_time <= at_time``, ascending."""
        raise NotImplementedError
