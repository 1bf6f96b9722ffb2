from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional

from ..model import WorkSession


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked(self, session: WorkSession) -> Optional[timedelta]:
        """Time credited for ``session``; None when it contributes nothing."""
        raise NotImplementedError
