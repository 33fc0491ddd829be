from datetime import datetime

import pytest

from timeclock.archive.service import ArchivalService
from timeclock.core.enums import PeriodKind
from timeclock.core.exceptions import StateError, ValidationError
from timeclock.hours.service import HoursService
from timeclock.shifts.service import ShiftTracker


@pytest.fixture
def seeded(users_repo, shifts_repo):
    ana = users_repo.get_or_create("Ana")
    luis = users_repo.get_or_create("Luis")
    # previous month
    shifts_repo.add(ana.user_id, datetime(2026, 9, 30, 9, 0), datetime(2026, 9, 30, 17, 0))
    shifts_repo.add(luis.user_id, datetime(2026, 9, 29, 9, 0))
    # previous week, current month
    shifts_repo.add(ana.user_id, datetime(2026, 10, 6, 9, 0), datetime(2026, 10, 6, 14, 0))
    # current week
    shifts_repo.add(ana.user_id, datetime(2026, 10, 12, 9, 0), datetime(2026, 10, 12, 12, 0))
    return ana, luis


def test_monthly_reset_purges_shifts_before_the_first(archive_repo, shifts_repo, clock, seeded):
    ana, _ = seeded
    service = ArchivalService(archive_repo, clock=clock)

    result = service.run_monthly_reset()

    assert result.kind is PeriodKind.MONTH
    assert result.boundary == datetime(2026, 10, 1)
    assert result.shifts_deleted == 2
    assert sorted(s.started_at.day for s in shifts_repo.shifts.values()) == [6, 12]

    assert result.summaries_written == 1
    summary = archive_repo.summaries[0]
    assert summary.user_id == ana.user_id
    assert summary.period_kind is PeriodKind.MONTH
    assert summary.period_start == datetime(2026, 9, 1)
    assert summary.period_end == datetime(2026, 10, 1)
    assert summary.hours == 8.0


def test_monthly_reset_without_snapshot(archive_repo, shifts_repo, clock, seeded):
    service = ArchivalService(archive_repo, clock=clock, snapshot_monthly=False)

    result = service.run_monthly_reset()

    assert result.summaries_written == 0
    assert result.shifts_deleted == 2
    assert archive_repo.summaries == []


def test_weekly_reset_snapshots_without_deleting(archive_repo, shifts_repo, clock, seeded):
    ana, _ = seeded
    service = ArchivalService(archive_repo, clock=clock)

    result = service.run_weekly_reset()

    assert result.kind is PeriodKind.WEEK
    assert result.boundary == datetime(2026, 10, 12)
    assert result.shifts_deleted == 0
    assert len(shifts_repo.shifts) == 4

    assert result.summaries_written == 1
    assert archive_repo.summaries[0].user_id == ana.user_id
    assert archive_repo.summaries[0].hours == 13.0


def test_monthly_reset_leaves_current_month_counters_intact(archive_repo, shifts_repo, clock, seeded):
    ana, _ = seeded
    hours = HoursService(shifts_repo, clock=clock)
    before = hours.monthly_hours(ana.user_id)

    ArchivalService(archive_repo, clock=clock).run_monthly_reset()

    assert hours.monthly_hours(ana.user_id) == before == "8.00"


def test_list_summaries_filters(archive_repo, clock, seeded):
    ana, _ = seeded
    service = ArchivalService(archive_repo, clock=clock)
    service.run_weekly_reset()
    service.run_monthly_reset()

    assert len(service.list_summaries()) == 2
    weekly = service.list_summaries(period_kind="week")
    assert [s.period_kind for s in weekly] == [PeriodKind.WEEK]
    assert len(service.list_summaries(user_id=str(ana.user_id), limit=1)) == 1


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"period_kind": "day"}, "tipo inválido"),
        ({"limit": 0}, "limit inválido"),
        ({"user_id": "abc"}, "userId inválido"),
    ],
)
def test_list_summaries_rejects_bad_filters(archive_repo, clock, kwargs, message):
    with pytest.raises(ValidationError, match=message):
        ArchivalService(archive_repo, clock=clock).list_summaries(**kwargs)


def test_monthly_reset_drops_open_shift_started_last_month(archive_repo, shifts_repo, users_repo, clock):
    luis = users_repo.get_or_create("Luis")
    shifts_repo.add(luis.user_id, datetime(2026, 9, 30, 22, 0))
    tracker = ShiftTracker(shifts_repo, users_repo, clock=clock)

    result = ArchivalService(archive_repo, clock=clock).run_monthly_reset()

    assert result.shifts_deleted == 1
    assert result.summaries_written == 0
    with pytest.raises(StateError, match="No hay turno activo"):
        tracker.clock_out(luis.user_id)
