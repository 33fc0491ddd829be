from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import next_month_start, next_week_start, now_local
from ..core.constants import DEFAULT_ARCHIVE_POLL_SECONDS
from .model import ArchiveResult
from .service import ArchivalService

logger = logging.getLogger(__name__)


def run_safely(name: str, job: Callable[[], ArchiveResult]) -> Optional[ArchiveResult]:
    """Run an archive job unattended: failures are logged, never raised."""
    try:
        return job()
    except Exception:
        logger.exception("Archive job %r failed", name)
        return None


class ArchiveScheduler:
    """Recurring trigger for the archive resets.

    ``run_pending`` fires each reset once per boundary crossing (Monday 00:00,
    day 1 00:00). ``start`` polls it from a daemon thread; cron users can call
    the service directly instead (see scripts/run_archive.py).
    """

    def __init__(
        self,
        service: ArchivalService,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        poll_seconds: float = DEFAULT_ARCHIVE_POLL_SECONDS,
    ):
        self._service = service
        self._clock = clock or now_local
        self._poll_seconds = float(poll_seconds)
        now = self._clock()
        self.next_weekly = next_week_start(now)
        self.next_monthly = next_month_start(now)

        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def catch_up(self, *, now: datetime | None = None) -> None:
        """Cold start: run both resets once (weekly first, it does not delete)."""
        now = now or self._clock()
        run_safely("weekly", lambda: self._service.run_weekly_reset(now=now))
        run_safely("monthly", lambda: self._service.run_monthly_reset(now=now))

    def run_pending(self, *, now: datetime | None = None) -> list[ArchiveResult]:
        now = now or self._clock()
        results: list[ArchiveResult] = []

        if now >= self.next_weekly:
            result = run_safely("weekly", lambda: self._service.run_weekly_reset(now=now))
            if result:
                results.append(result)
            self.next_weekly = next_week_start(now)

        if now >= self.next_monthly:
            result = run_safely("monthly", lambda: self._service.run_monthly_reset(now=now))
            if result:
                results.append(result)
            self.next_monthly = next_month_start(now)

        return results

    def _loop(self) -> None:
        while not self._stop.wait(self._poll_seconds):
            self.run_pending()

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="archive-scheduler", daemon=True)
        self._thread.start()
        logger.info(
            "Archive scheduler started (next weekly %s, next monthly %s)",
            self.next_weekly.isoformat(),
            self.next_monthly.isoformat(),
        )

    def stop(self) -> None:
        self._stop.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=2.0)
        self._thread = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())
