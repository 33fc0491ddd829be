from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Protocol


class TimedShift(Protocol):
    started_at: datetime
    ended_at: Optional[datetime]


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def elapsed_hours(self, shift: TimedShift) -> float:
        raise NotImplementedError
