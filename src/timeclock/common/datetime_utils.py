from __future__ import annotations

from datetime import datetime, time, timedelta


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can inject a fixed clock instead.
    """
    return datetime.now()


def _midnight(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min, tzinfo=value.tzinfo)


def week_start(now: datetime) -> datetime:
    """Monday 00:00 of the week containing ``now``.

    Weeks start on Monday: a Sunday belongs to the week that began six days earlier.
    """
    return _midnight(now) - timedelta(days=now.weekday())


def month_start(now: datetime) -> datetime:
    """Day 1, 00:00 of the month containing ``now``."""
    return _midnight(now).replace(day=1)


def next_week_start(now: datetime) -> datetime:
    return week_start(now) + timedelta(days=7)


def next_month_start(now: datetime) -> datetime:
    # Day 28 + 4 always lands in the following month.
    return (month_start(now).replace(day=28) + timedelta(days=4)).replace(day=1)


def previous_month_start(now: datetime) -> datetime:
    return month_start(month_start(now) - timedelta(days=1))
