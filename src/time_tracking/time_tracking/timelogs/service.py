from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.validators import require_ordered_range
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..timesheet.aggregator import aggregate
from ..timesheet.calculator.base import WorkedTimeCalculator
from ..timesheet.model import TimesheetSummary
from ..timesheet.pairing import pair_and_summarize
from ..timesheet.presence import is_present, present_employee_ids
from .model import CheckEvent, PresenceSet
from .repository import EventStore

logger = logging.getLogger(__name__)


class TimeLogService:
    """Use cases over check events: recording, timesheets and presence."""

    def __init__(
        self,
        events: EventStore,
        employees: EmployeeRepository,
        *,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._events = events
        self._employees = employees
        self._calculator = calculator

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.exists(employee_id):
            raise NotFoundError("Employee", employee_id)

    def record_check(self, *, employee_id: int, check_time: datetime) -> CheckEvent:
        """Store a check-in or check-out; which one it is follows from its position."""

        self._require_employee(employee_id)
        event = self._events.create(employee_id=employee_id, check_time=check_time)
        logger.info(
            "TimeLog created: employeeId=%s, checkTime=%s",
            event.employee_id,
            event.check_time.isoformat(),
            extra={"employee_id": event.employee_id},
        )
        return event

    def delete_time_log(self, event_id: int) -> None:
        if not self._events.get_by_id(event_id):
            raise NotFoundError("TimeLog", event_id)
        self._events.delete_by_id(event_id)
        logger.info("TimeLog deleted: id=%s", event_id)

    def get_employee_logs(self, employee_id: int, date_from: datetime, date_to: datetime) -> Sequence[CheckEvent]:
        require_ordered_range(date_from, date_to)
        self._require_employee(employee_id)
        return self._events.fetch_for_employee(employee_id, date_from, date_to)

    def calculate_timesheet(self, employee_id: int, date_from: datetime, date_to: datetime) -> TimesheetSummary:
        require_ordered_range(date_from, date_to)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee", employee_id)

        events = self._events.fetch_for_employee(employee_id, date_from, date_to)
        daily = pair_and_summarize(events, date_from, date_to, calculator=self._calculator)
        summary = aggregate(employee_id, date_from, date_to, daily, employee)

        logger.info(
            "Timesheet calculated for employee %s (%s %s): %d days, %s total hours",
            employee_id,
            summary.first_name,
            summary.last_name,
            len(summary.daily_records),
            summary.total_hours,
            extra={"employee_id": employee_id},
        )
        return summary

    def is_employee_present(self, employee_id: int, at_time: datetime) -> bool:
        self._require_employee(employee_id)
        history = self._events.fetch_employee_history(employee_id, at_time)
        return is_present(history, at_time)

    def find_present(self, at_time: datetime) -> PresenceSet:
        events = self._events.fetch_all_up_to_time(at_time)
        ids = present_employee_ids(events, at_time)
        employees = sorted(self._employees.list_by_ids(ids), key=lambda e: e.employee_id)

        logger.info("Present employees at %s: %d employees", at_time.isoformat(), len(employees))
        return PresenceSet(at_time=at_time, employees=employees)
