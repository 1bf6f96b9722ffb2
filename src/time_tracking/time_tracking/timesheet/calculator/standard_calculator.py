from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ..model import WorkSession
from .base import WorkedTimeCalculator


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: closed sessions count (out - in), open sessions count nothing."""

    def worked(self, session: WorkSession) -> Optional[timedelta]:
        if not session.is_closed:
            return None
        return session.duration
