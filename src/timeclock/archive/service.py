from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from ..common.datetime_utils import month_start, now_local, previous_month_start, week_start
from ..common.validators import require_user_id
from ..core.constants import DEFAULT_SUMMARY_LIMIT
from ..core.enums import PeriodKind
from ..core.exceptions import ValidationError
from ..hours.aggregator import per_user_totals
from ..hours.calculator.base import HoursCalculator
from ..hours.calculator.standard_calculator import StandardHoursCalculator
from ..shifts.model import ShiftReportRow
from .model import ArchiveResult, NewSummary, Summary
from .repository import ArchiveRepository

logger = logging.getLogger(__name__)


def _no_snapshot(rows: Sequence[ShiftReportRow]) -> List[NewSummary]:
    return []


class ArchivalService:
    """Weekly/monthly resets, exposed as plain callables for any scheduler.

    Weekly: snapshot closed shifts started before this week's Monday, keep them.
    Monthly: snapshot (unless disabled) then delete shifts started before the 1st,
    open ones included. Monthly summaries are labelled previous 1st .. this 1st.
    """

    def __init__(
        self,
        archive: ArchiveRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
        clock: Optional[Callable[[], datetime]] = None,
        snapshot_monthly: bool = True,
    ):
        self._archive = archive
        self._calculator = calculator or StandardHoursCalculator()
        self._clock = clock or now_local
        self._snapshot_monthly = bool(snapshot_monthly)

    def _summarizer(self, kind: PeriodKind, period_start: datetime, period_end: datetime):
        def summarize(rows: Sequence[ShiftReportRow]) -> List[NewSummary]:
            return [
                NewSummary(
                    user_id=u.user_id,
                    period_kind=kind,
                    period_start=period_start,
                    period_end=period_end,
                    hours=u.hours,
                )
                for u in per_user_totals(rows, calculator=self._calculator)
            ]

        return summarize

    def run_weekly_reset(self, *, now: datetime | None = None) -> ArchiveResult:
        now = now or self._clock()
        boundary = week_start(now)

        written, deleted = self._archive.archive_before(
            before=boundary,
            summarize=self._summarizer(PeriodKind.WEEK, boundary, now),
            purge=False,
        )
        result = ArchiveResult(kind=PeriodKind.WEEK, boundary=boundary, summaries_written=written, shifts_deleted=deleted)
        logger.info("Weekly reset at %s: %d summaries written", boundary.isoformat(), written)
        return result

    def run_monthly_reset(self, *, now: datetime | None = None) -> ArchiveResult:
        now = now or self._clock()
        boundary = month_start(now)

        if self._snapshot_monthly:
            summarize = self._summarizer(PeriodKind.MONTH, previous_month_start(now), boundary)
        else:
            summarize = _no_snapshot

        written, deleted = self._archive.archive_before(before=boundary, summarize=summarize, purge=True)
        result = ArchiveResult(kind=PeriodKind.MONTH, boundary=boundary, summaries_written=written, shifts_deleted=deleted)
        logger.info(
            "Monthly reset at %s: %d summaries written, %d shifts deleted",
            boundary.isoformat(),
            written,
            deleted,
        )
        return result

    def list_summaries(
        self,
        *,
        user_id=None,
        period_kind: Optional[str] = None,
        limit: int = DEFAULT_SUMMARY_LIMIT,
    ) -> Sequence[Summary]:
        uid = require_user_id(user_id) if user_id not in (None, "") else None

        kind = None
        if period_kind:
            try:
                kind = PeriodKind(period_kind)
            except ValueError:
                raise ValidationError("tipo inválido (week|month)")

        if int(limit) <= 0:
            raise ValidationError("limit inválido")

        return self._archive.list_summaries(user_id=uid, period_kind=kind, limit=int(limit))
