from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..employees.model import Employee
from .model import DailySummary, TimesheetSummary


def aggregate(
    employee_id: int,
    date_from: datetime,
    date_to: datetime,
    daily_records: Sequence[DailySummary],
    employee: Optional[Employee] = None,
) -> TimesheetSummary:
    """Combine daily summaries into a timesheet.

    Days without a closed session count as zero minutes. Names are attached
    only when there is at least one daily record, so an empty range reports
    ``"0:00"`` with no names.
    """

    records = tuple(sorted(daily_records, key=lambda r: r.work_date))
    total_minutes = sum(r.worked_minutes for r in records)

    named = employee if records else None
    return TimesheetSummary(
        employee_id=employee_id,
        first_name=named.first_name if named else None,
        last_name=named.last_name if named else None,
        date_from=date_from,
        date_to=date_to,
        total_minutes=total_minutes,
        daily_records=records,
    )
