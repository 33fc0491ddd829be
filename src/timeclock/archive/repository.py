from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Protocol, Sequence, Tuple

from ..core.enums import PeriodKind
from ..shifts.model import ShiftReportRow
from .model import NewSummary, Summary

Summarizer = Callable[[Sequence[ShiftReportRow]], Sequence[NewSummary]]


class ArchiveRepository(Protocol):
    def archive_before(self, *, before: datetime, summarize: Summarizer, purge: bool) -> Tuple[int, int]:
        """Snapshot, then optionally purge, shifts started before ``before``.

        In one transaction: load the closed shifts started before ``before``,
        append whatever ``summarize`` returns for them, and when ``purge`` is set
        delete every shift started before ``before``.
        Returns ``(summaries_written, shifts_deleted)``.
        """

        raise NotImplementedError

    def list_summaries(
        self,
        *,
        user_id: Optional[int] = None,
        period_kind: Optional[PeriodKind] = None,
        limit: int = 200,
    ) -> Sequence[Summary]:
        raise NotImplementedError
