from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


def elapsed_minutes(started_at: datetime, ended_at: datetime) -> float:
    """Minutes between two instants, two decimals, never negative."""
    minutes = (ended_at - started_at).total_seconds() / 60
    return round(max(minutes, 0.0), 2)


@dataclass(frozen=True)
class Shift:
    """Domain entity: one clock-in/clock-out session.

    ``ended_at`` is None while the shift is open.
    """

    shift_id: int
    user_id: int
    started_at: datetime
    ended_at: Optional[datetime] = None
    elapsed_minutes: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.ended_at is None

    def close(self, ended_at: datetime) -> "Shift":
        return replace(self, ended_at=ended_at, elapsed_minutes=elapsed_minutes(self.started_at, ended_at))


@dataclass(frozen=True)
class ShiftReportRow:
    """Read-model: a shift joined with its owner's display name."""

    shift_id: int
    user_id: int
    name: str
    started_at: datetime
    ended_at: Optional[datetime]
    elapsed_minutes: Optional[float] = None
