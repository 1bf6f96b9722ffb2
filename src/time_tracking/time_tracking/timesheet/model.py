from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from .duration import format_daily_hours, format_total_hours, minutes_of


@dataclass(frozen=True)
class WorkSession:
    """A (check-in, check-out) pair for one day. ``check_out`` is None while open."""

    employee_id: int
    work_date: date
    check_in: datetime
    check_out: Optional[datetime] = None

    @property
    def is_closed(self) -> bool:
        return self.check_out is not None

    @property
    def duration(self) -> Optional[timedelta]:
        if self.check_out is None:
            return None
        return self.check_out - self.check_in


@dataclass(frozen=True)
class DailySummary:
    employee_id: int
    work_date: date
    first_entry: Optional[time]
    last_exit: Optional[time]
    worked: Optional[timedelta]
    total_entries: int

    @property
    def worked_minutes(self) -> int:
        return minutes_of(self.worked) if self.worked is not None else 0

    @property
    def hours_worked(self) -> Optional[str]:
        if self.worked is None:
            return None
        return format_daily_hours(self.worked_minutes)


@dataclass(frozen=True)
class TimesheetSummary:
    employee_id: int
    first_name: Optional[str]
    last_name: Optional[str]
    date_from: datetime
    date_to: datetime
    total_minutes: int
    daily_records: tuple[DailySummary, ...] = ()

    @property
    def total_hours(self) -> str:
        return format_total_hours(self.total_minutes)
