"""Presence evaluation.

Every check event toggles an employee between OUT and IN, so the state at an
instant is the parity of the events recorded at or before it. The whole
history counts, not just the current day: a check-in late in the evening with
no check-out keeps the employee IN past midnight.
"""

from __future__ import annotations

from datetime import datetime
from itertools import groupby
from typing import Iterable, Sequence

from ..core.enums import PresenceState
from ..core.exceptions import MalformedInputError
from ..timelogs.model import CheckEvent
from .validation import ensure_single_employee_ascending


def presence_state(events: Sequence[CheckEvent], at_time: datetime) -> PresenceState:
    ensure_single_employee_ascending(events)

    state = PresenceState.OUT
    for event in events:
        if event.check_time > at_time:
            break
        state = state.toggled()
    return state


def is_present(events: Sequence[CheckEvent], at_time: datetime) -> bool:
    """True when an odd number of events happened at or before ``at_time``."""
    return presence_state(events, at_time) is PresenceState.IN


def present_employee_ids(events: Iterable[CheckEvent], at_time: datetime) -> list[int]:
    """Bulk presence over events of many employees.

    ``events`` must be ordered by ``(employee_id, check_time)``, as returned by
    ``EventStore.fetch_all_up_to_time``. For each employee, the rank of its
    last event at or before ``at_time`` within its own ascending sequence
    decides: odd rank means inside.
    """

    present: list[int] = []
    last_employee_id = None
    for employee_id, group in groupby(events, key=lambda e: e.employee_id):
        if last_employee_id is not None and employee_id <= last_employee_id:
            raise MalformedInputError("events must be grouped by ascending employee id")
        last_employee_id = employee_id

        employee_events = list(group)
        ensure_single_employee_ascending(employee_events)
        rank = sum(1 for e in employee_events if e.check_time <= at_time)
        if rank % 2 == 1:
            present.append(employee_id)
    return present
