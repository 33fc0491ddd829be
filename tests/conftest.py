from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from timeclock.archive.model import Summary
from timeclock.container import wire
from timeclock.main import create_app
from timeclock.shifts.model import Shift, ShiftReportRow
from timeclock.users.model import User


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_name(self, name: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.name == name), None)

    def get_or_create(self, name: str) -> User:
        existing = self.get_by_name(name)
        if existing:
            return existing
        self._id += 1
        user = User(user_id=self._id, name=name)
        self._by_id[user.user_id] = user
        return user


class InMemoryShifts:
    def __init__(self, users: InMemoryUsers):
        self._users = users
        self.shifts: dict[int, Shift] = {}
        self._id = 0

    def add(self, user_id: int, started_at: datetime, ended_at: Optional[datetime] = None) -> Shift:
        """Seed a shift directly, bypassing the one-open-shift rule."""
        self._id += 1
        shift = Shift(shift_id=self._id, user_id=user_id, started_at=started_at)
        if ended_at:
            shift = shift.close(ended_at)
        self.shifts[shift.shift_id] = shift
        return shift

    def row(self, s: Shift) -> ShiftReportRow:
        return ShiftReportRow(
            shift_id=s.shift_id,
            user_id=s.user_id,
            name=self._users.get_by_id(s.user_id).name,
            started_at=s.started_at,
            ended_at=s.ended_at,
            elapsed_minutes=s.elapsed_minutes,
        )

    def get_open_for_user(self, user_id: int) -> Optional[Shift]:
        open_shifts = [s for s in self.shifts.values() if s.user_id == user_id and s.is_open]
        open_shifts.sort(key=lambda s: s.started_at, reverse=True)
        return open_shifts[0] if open_shifts else None

    def open_shift(self, *, user_id: int, started_at: datetime) -> Optional[Shift]:
        if self.get_open_for_user(user_id):
            return None
        return self.add(user_id, started_at)

    def close_open_shift(self, *, user_id: int, ended_at: datetime) -> Optional[Shift]:
        shift = self.get_open_for_user(user_id)
        if not shift:
            return None
        closed = shift.close(ended_at)
        self.shifts[closed.shift_id] = closed
        return closed

    def list_with_names(self):
        rows = [self.row(s) for s in self.shifts.values()]
        rows.sort(key=lambda r: r.started_at, reverse=True)
        return rows

    def list_closed_since(self, *, since: datetime, user_id: Optional[int] = None):
        rows = [
            self.row(s)
            for s in self.shifts.values()
            if s.started_at >= since and s.ended_at is not None and (user_id is None or s.user_id == user_id)
        ]
        rows.sort(key=lambda r: r.started_at)
        return rows


class InMemoryArchive:
    def __init__(self, users: InMemoryUsers, shifts: InMemoryShifts):
        self._users = users
        self._shifts = shifts
        self.summaries: list[Summary] = []

    def archive_before(self, *, before: datetime, summarize, purge: bool):
        closed = sorted(
            (s for s in self._shifts.shifts.values() if s.started_at < before and s.ended_at is not None),
            key=lambda s: s.started_at,
        )
        new = list(summarize([self._shifts.row(s) for s in closed]))
        for n in new:
            self.summaries.append(
                Summary(
                    summary_id=len(self.summaries) + 1,
                    user_id=n.user_id,
                    name=self._users.get_by_id(n.user_id).name,
                    period_kind=n.period_kind,
                    period_start=n.period_start,
                    period_end=n.period_end,
                    hours=round(n.hours, 2),
                )
            )

        deleted = 0
        if purge:
            doomed = [sid for sid, s in self._shifts.shifts.items() if s.started_at < before]
            for sid in doomed:
                del self._shifts.shifts[sid]
            deleted = len(doomed)
        return len(new), deleted

    def list_summaries(self, *, user_id=None, period_kind=None, limit=200):
        items = [
            s
            for s in self.summaries
            if (user_id is None or s.user_id == user_id) and (period_kind is None or s.period_kind == period_kind)
        ]
        items.sort(key=lambda s: (s.period_start, s.summary_id), reverse=True)
        return items[:limit]


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; the previous week (from Monday 2026-10-05) is in the same month.
    return datetime(2026, 10, 14, 10, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def shifts_repo(users_repo) -> InMemoryShifts:
    return InMemoryShifts(users_repo)


@pytest.fixture
def archive_repo(users_repo, shifts_repo) -> InMemoryArchive:
    return InMemoryArchive(users_repo, shifts_repo)


@pytest.fixture
def container(users_repo, shifts_repo, archive_repo, clock):
    return wire(users_repo=users_repo, shifts_repo=shifts_repo, archive_repo=archive_repo, clock=clock)


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="timeclock.config.testing")
    yield app
    app.extensions["timeclock.archive_scheduler"].stop()


@pytest.fixture
def client(app):
    return app.test_client()
