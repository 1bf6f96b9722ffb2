from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee whose check events are tracked.

    The timesheet engine only uses ``employee_id`` as an opaque key; names are
    joined in for display.
    """

    employee_id: int
    first_name: str
    last_name: str
    created_at: Optional[datetime] = None
