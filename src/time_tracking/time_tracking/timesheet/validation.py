from __future__ import annotations

from typing import Sequence

from ..core.exceptions import MalformedInputError
from ..timelogs.model import CheckEvent


def ensure_single_employee_ascending(events: Sequence[CheckEvent]) -> None:
    """Reject input the parity rules cannot interpret.

    Events must all belong to one employee and be strictly ascending by
    ``check_time``; equal timestamps count as duplicates.
    """

    previous = None
    for event in events:
        if previous is not None:
            if event.employee_id != previous.employee_id:
                raise MalformedInputError(
                    f"events for employees {previous.employee_id} and {event.employee_id} cannot be paired together"
                )
            if event.check_time == previous.check_time:
                raise MalformedInputError(
                    f"duplicate check time {event.check_time.isoformat()} for employee {event.employee_id}"
                )
            if event.check_time < previous.check_time:
                raise MalformedInputError(
                    f"events out of order: {event.check_time.isoformat()} after {previous.check_time.isoformat()}"
                )
        previous = event
