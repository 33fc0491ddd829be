from __future__ import annotations

from enum import Enum


class PeriodKind(str, Enum):
    """Kind of closed period an archived summary covers."""

    WEEK = "week"
    MONTH = "month"
