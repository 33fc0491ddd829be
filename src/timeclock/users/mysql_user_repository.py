from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(user_id=int(row["user_id"]), name=row["name"], created_at=row.get("created_at"))


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT user_id, name, created_at FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_name(self, name: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT user_id, name, created_at FROM users WHERE name=%s", (name,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_or_create(self, name: str) -> User:
        with db_cursor(self._conn_factory) as (_, cur):
            # LAST_INSERT_ID(expr) makes lastrowid point at the existing row on a duplicate name.
            cur.execute(
                """
                INSERT INTO users(name) VALUES(%s)
                ON DUPLICATE KEY UPDATE user_id=LAST_INSERT_ID(user_id)
                """,
                (name,),
            )
            user_id = int(cur.lastrowid)
            cur.execute("SELECT user_id, name, created_at FROM users WHERE user_id=%s", (user_id,))
            return _to_user(fetchone(cur))
