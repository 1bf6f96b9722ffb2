"""Pairing engine.

Check events carry no in/out flag. Within one calendar day the events are
numbered 1..N in time order and position ``2k-1`` (check-in) is paired with
``2k`` (check-out). An odd N leaves the last session open.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from itertools import groupby
from typing import Optional, Sequence

from ..common.validators import require_ordered_range
from ..core.exceptions import MalformedInputError
from ..timelogs.model import CheckEvent
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .model import DailySummary, WorkSession
from .validation import ensure_single_employee_ascending

logger = logging.getLogger(__name__)


def _event_date(event: CheckEvent) -> date:
    return event.check_time.date()


def _pair_day(day_events: Sequence[CheckEvent]) -> list[WorkSession]:
    sessions: list[WorkSession] = []
    for i in range(0, len(day_events), 2):
        check_in = day_events[i]
        check_out = day_events[i + 1] if i + 1 < len(day_events) else None
        sessions.append(
            WorkSession(
                employee_id=check_in.employee_id,
                work_date=_event_date(check_in),
                check_in=check_in.check_time,
                check_out=check_out.check_time if check_out else None,
            )
        )
    return sessions


def pair_sessions(events: Sequence[CheckEvent]) -> list[WorkSession]:
    """Split an ascending event sequence for one employee into per-day sessions."""

    ensure_single_employee_ascending(events)
    sessions: list[WorkSession] = []
    for _, day_events in groupby(events, key=_event_date):
        sessions.extend(_pair_day(list(day_events)))
    return sessions


def _summarize_day(
    work_date: date,
    day_events: Sequence[CheckEvent],
    calculator: WorkedTimeCalculator,
) -> DailySummary:
    sessions = _pair_day(day_events)

    worked: Optional[timedelta] = None
    last_exit = None
    for session in sessions:
        credited = calculator.worked(session)
        if credited is not None:
            worked = credited if worked is None else worked + credited
        if session.check_out is not None:
            last_exit = session.check_out.time()

    return DailySummary(
        employee_id=day_events[0].employee_id,
        work_date=work_date,
        first_entry=sessions[0].check_in.time(),
        last_exit=last_exit,
        worked=worked,
        total_entries=len(day_events),
    )


def pair_and_summarize(
    events: Sequence[CheckEvent],
    date_from: datetime,
    date_to: datetime,
    *,
    calculator: Optional[WorkedTimeCalculator] = None,
) -> list[DailySummary]:
    """Build one ``DailySummary`` per calendar day that has at least one event.

    ``events`` must already be limited to ``date_from <= check_time < date_to``
    and sorted ascending. Days whose sessions are all open are still reported,
    with ``worked`` and ``last_exit`` set to None.
    """

    require_ordered_range(date_from, date_to)
    ensure_single_employee_ascending(events)
    for event in events:
        if not (date_from <= event.check_time < date_to):
            raise MalformedInputError(
                f"check time {event.check_time.isoformat()} outside [{date_from.isoformat()}, {date_to.isoformat()})"
            )

    calculator = calculator or StandardWorkedTimeCalculator()
    summaries = [
        _summarize_day(work_date, list(day_events), calculator)
        for work_date, day_events in groupby(events, key=_event_date)
    ]
    logger.debug("Paired %d events into %d daily records", len(events), len(summaries))
    return summaries
