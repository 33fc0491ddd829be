from datetime import datetime

from timeclock.hours.aggregator import per_user_breakdown, per_user_totals, sum_hours
from timeclock.shifts.model import ShiftReportRow


def _row(shift_id, user_id, name, start, end):
    return ShiftReportRow(shift_id=shift_id, user_id=user_id, name=name, started_at=start, ended_at=end)


def test_sum_hours_formats_two_decimals():
    rows = [_row(1, 1, "Ana", datetime(2026, 10, 12, 9, 0), datetime(2026, 10, 12, 10, 30))]

    assert sum_hours(rows) == "1.50"


def test_sum_hours_ignores_open_shifts():
    rows = [
        _row(1, 1, "Ana", datetime(2026, 10, 12, 9, 0), datetime(2026, 10, 12, 11, 0)),
        _row(2, 1, "Ana", datetime(2026, 10, 13, 9, 0), None),
    ]

    assert sum_hours(rows) == "2.00"


def test_sum_hours_empty_is_zero():
    assert sum_hours([]) == "0.00"


def test_per_user_totals_keeps_first_appearance_order():
    rows = [
        _row(1, 2, "Luis", datetime(2026, 10, 12, 8, 0), datetime(2026, 10, 12, 9, 0)),
        _row(2, 1, "Ana", datetime(2026, 10, 12, 9, 0), datetime(2026, 10, 12, 12, 0)),
        _row(3, 2, "Luis", datetime(2026, 10, 13, 8, 0), datetime(2026, 10, 13, 8, 30)),
    ]

    totals = per_user_totals(rows)

    assert [(u.user_id, u.name) for u in totals] == [(2, "Luis"), (1, "Ana")]
    assert totals[0].hours == 1.5
    assert per_user_breakdown(rows) == {"Luis": "1.50", "Ana": "3.00"}
