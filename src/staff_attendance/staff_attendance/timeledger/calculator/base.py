from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import WorkingTime, WorkSession


class WorkingTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for working time)."""

    @abstractmethod
    def working_time(self, session: WorkSession, *, now: datetime) -> WorkingTime:
        raise NotImplementedError
