"""In-memory repositories standing in for the MySQL ones in service/controller tests."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from src.time_tracking.time_tracking.core.exceptions import ConflictError
from src.time_tracking.time_tracking.employees.model import Employee
from src.time_tracking.time_tracking.timelogs.model import CheckEvent

CREATED_AT = datetime(2024, 12, 1, 8, 0)


class InMemoryEmployees:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[int, Employee] = {e.employee_id: e for e in employees}
        self._id = max(self._by_id, default=0)
        self.bulk_calls = 0

    def exists(self, employee_id: int) -> bool:
        return employee_id in self._by_id

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_by_ids(self, employee_ids):
        self.bulk_calls += 1
        return [self._by_id[i] for i in sorted(set(employee_ids)) if i in self._by_id]

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: (e.last_name, e.first_name, e.employee_id))

    def search_by_name(self, term: str):
        term = term.lower()
        return [e for e in self.list_all() if term in e.first_name.lower() or term in e.last_name.lower()]

    def exists_by_name(self, first_name: str, last_name: str) -> bool:
        return any(e.first_name == first_name and e.last_name == last_name for e in self._by_id.values())

    def create(self, *, first_name: str, last_name: str) -> Employee:
        self._id += 1
        employee = Employee(self._id, first_name, last_name, CREATED_AT)
        self._by_id[self._id] = employee
        return employee

    def update(self, *, employee_id: int, first_name: str, last_name: str) -> Optional[Employee]:
        current = self._by_id.get(employee_id)
        if not current:
            return None
        updated = Employee(employee_id, first_name, last_name, current.created_at)
        self._by_id[employee_id] = updated
        return updated

    def delete_by_id(self, employee_id: int) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryEvents:
    def __init__(self):
        self._events: list[CheckEvent] = []
        self._id = 0

    def create(self, *, employee_id: int, check_time: datetime) -> CheckEvent:
        if any(e.employee_id == employee_id and e.check_time == check_time for e in self._events):
            raise ConflictError(f"Time log already exists for employee {employee_id} at {check_time.isoformat()}")
        self._id += 1
        event = CheckEvent(employee_id=employee_id, check_time=check_time, event_id=self._id, created_at=CREATED_AT)
        self._events.append(event)
        return event

    def get_by_id(self, event_id: int) -> Optional[CheckEvent]:
        return next((e for e in self._events if e.event_id == event_id), None)

    def delete_by_id(self, event_id: int) -> bool:
        before = len(self._events)
        self._events = [e for e in self._events if e.event_id != event_id]
        return len(self._events) < before

    def fetch_for_employee(self, employee_id, date_from, date_to):
        return sorted(
            (e for e in self._events if e.employee_id == employee_id and date_from <= e.check_time < date_to),
            key=lambda e: e.check_time,
        )

    def fetch_employee_history(self, employee_id, at_time):
        return sorted(
            (e for e in self._events if e.employee_id == employee_id and e.check_time <= at_time),
            key=lambda e: e.check_time,
        )

    def fetch_all_up_to_time(self, at_time):
        return sorted(
            (e for e in self._events if e.check_time <= at_time),
            key=lambda e: (e.employee_id, e.check_time),
        )
