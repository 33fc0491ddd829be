from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Shift, ShiftReportRow
from .repository import ShiftRepository

_SHIFT_COLUMNS = "shift_id, user_id, started_at, ended_at, elapsed_minutes"


def _to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        user_id=int(r["user_id"]),
        started_at=r["started_at"],
        ended_at=r.get("ended_at"),
        elapsed_minutes=as_float(r.get("elapsed_minutes")),
    )


def to_report_row(r: dict) -> ShiftReportRow:
    return ShiftReportRow(
        shift_id=int(r["shift_id"]),
        user_id=int(r["user_id"]),
        name=r["name"],
        started_at=r["started_at"],
        ended_at=r.get("ended_at"),
        elapsed_minutes=as_float(r.get("elapsed_minutes")),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def open_shift(self, *, user_id: int, started_at: datetime) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Locking the user row serializes concurrent clock-ins for the same user.
            cur.execute("SELECT user_id FROM users WHERE user_id=%s FOR UPDATE", (user_id,))
            fetchone(cur)
            cur.execute(
                f"SELECT {_SHIFT_COLUMNS} FROM shifts WHERE user_id=%s AND ended_at IS NULL LIMIT 1",
                (user_id,),
            )
            if fetchone(cur):
                return None

            cur.execute(
                "INSERT INTO shifts(user_id, started_at) VALUES(%s,%s)",
                (user_id, started_at),
            )
            return Shift(shift_id=int(cur.lastrowid), user_id=user_id, started_at=started_at)

    def close_open_shift(self, *, user_id: int, ended_at: datetime) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SHIFT_COLUMNS}
                FROM shifts
                WHERE user_id=%s AND ended_at IS NULL
                ORDER BY started_at DESC
                LIMIT 1
                FOR UPDATE
                """,
                (user_id,),
            )
            row = fetchone(cur)
            if not row:
                return None

            closed = _to_shift(row).close(ended_at)
            cur.execute(
                "UPDATE shifts SET ended_at=%s, elapsed_minutes=%s WHERE shift_id=%s",
                (closed.ended_at, closed.elapsed_minutes, closed.shift_id),
            )
            return closed

    def get_open_for_user(self, user_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SHIFT_COLUMNS}
                FROM shifts
                WHERE user_id=%s AND ended_at IS NULL
                ORDER BY started_at DESC
                LIMIT 1
                """,
                (user_id,),
            )
            row = fetchone(cur)
            return _to_shift(row) if row else None

    def list_with_names(self) -> Sequence[ShiftReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.shift_id, s.user_id, u.name, s.started_at, s.ended_at, s.elapsed_minutes
                FROM shifts s
                JOIN users u ON u.user_id = s.user_id
                ORDER BY s.started_at DESC
                """
            )
            return [to_report_row(r) for r in fetchall(cur)]

    def list_closed_since(self, *, since: datetime, user_id: Optional[int] = None) -> Sequence[ShiftReportRow]:
        clauses = ["s.started_at >= %s", "s.ended_at IS NOT NULL"]
        params: list[object] = [since]
        if user_id is not None:
            clauses.append("s.user_id=%s")
            params.append(int(user_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.shift_id, s.user_id, u.name, s.started_at, s.ended_at, s.elapsed_minutes
                FROM shifts s
                JOIN users u ON u.user_id = s.user_id
                WHERE {where}
                ORDER BY s.started_at ASC
                """,
                tuple(params),
            )
            return [to_report_row(r) for r in fetchall(cur)]
