from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple

from ..core.enums import PeriodKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall
from ..shifts.mysql_shift_repository import to_report_row
from .model import Summary
from .repository import ArchiveRepository, Summarizer


class MySQLArchiveRepository(ArchiveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def archive_before(self, *, before: datetime, summarize: Summarizer, purge: bool) -> Tuple[int, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.shift_id, s.user_id, u.name, s.started_at, s.ended_at, s.elapsed_minutes
                FROM shifts s
                JOIN users u ON u.user_id = s.user_id
                WHERE s.started_at < %s AND s.ended_at IS NOT NULL
                ORDER BY s.started_at ASC
                FOR UPDATE
                """,
                (before,),
            )
            rows = [to_report_row(r) for r in fetchall(cur)]

            summaries = list(summarize(rows))
            if summaries:
                cur.executemany(
                    """
                    INSERT INTO summaries(user_id, period_kind, period_start, period_end, hours)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    [
                        (s.user_id, s.period_kind.value, s.period_start, s.period_end, round(s.hours, 2))
                        for s in summaries
                    ],
                )

            deleted = 0
            if purge:
                cur.execute("DELETE FROM shifts WHERE started_at < %s", (before,))
                deleted = int(cur.rowcount)

            return len(summaries), deleted

    def list_summaries(
        self,
        *,
        user_id: Optional[int] = None,
        period_kind: Optional[PeriodKind] = None,
        limit: int = 200,
    ) -> Sequence[Summary]:
        clauses = ["1=1"]
        params: list[object] = []
        if user_id is not None:
            clauses.append("sm.user_id=%s")
            params.append(int(user_id))
        if period_kind is not None:
            clauses.append("sm.period_kind=%s")
            params.append(period_kind.value)
        params.append(int(limit))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT sm.summary_id, sm.user_id, u.name, sm.period_kind,
                       sm.period_start, sm.period_end, sm.hours, sm.created_at
                FROM summaries sm
                JOIN users u ON u.user_id = sm.user_id
                WHERE {where}
                ORDER BY sm.period_start DESC, sm.summary_id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [
                Summary(
                    summary_id=int(r["summary_id"]),
                    user_id=int(r["user_id"]),
                    name=r["name"],
                    period_kind=PeriodKind(r["period_kind"]),
                    period_start=r["period_start"],
                    period_end=r["period_end"],
                    hours=as_float(r["hours"]),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
