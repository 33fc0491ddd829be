from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PeriodKind


@dataclass(frozen=True)
class NewSummary:
    """A summary about to be appended to the log."""

    user_id: int
    period_kind: PeriodKind
    period_start: datetime
    period_end: datetime
    hours: float


@dataclass(frozen=True)
class Summary:
    """Domain entity: hours worked by one user over one closed period. Append-only."""

    summary_id: int
    user_id: int
    name: str
    period_kind: PeriodKind
    period_start: datetime
    period_end: datetime
    hours: float
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ArchiveResult:
    kind: PeriodKind
    boundary: datetime
    summaries_written: int
    shifts_deleted: int
