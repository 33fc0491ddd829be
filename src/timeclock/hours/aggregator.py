"""Pure aggregation of worked time over shift records.

Every function takes already-selected shifts; choosing the time window is the
caller's job (see ``HoursService``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..core.constants import HOURS_FORMAT
from ..shifts.model import ShiftReportRow
from .calculator.base import HoursCalculator, TimedShift
from .calculator.standard_calculator import StandardHoursCalculator

_DEFAULT_CALCULATOR = StandardHoursCalculator()


@dataclass(frozen=True)
class UserHours:
    user_id: int
    name: str
    hours: float

    @property
    def formatted(self) -> str:
        return format_hours(self.hours)


def format_hours(hours: float) -> str:
    return HOURS_FORMAT.format(hours)


def total_hours(shifts: Iterable[TimedShift], *, calculator: Optional[HoursCalculator] = None) -> float:
    calc = calculator or _DEFAULT_CALCULATOR
    return sum(calc.elapsed_hours(s) for s in shifts if s.started_at and s.ended_at)


def sum_hours(shifts: Iterable[TimedShift], *, calculator: Optional[HoursCalculator] = None) -> str:
    """Total of closed shifts as a two-decimal string; open shifts are ignored."""
    return format_hours(total_hours(shifts, calculator=calculator))


def per_user_totals(
    rows: Iterable[ShiftReportRow], *, calculator: Optional[HoursCalculator] = None
) -> List[UserHours]:
    """Hours per owning user, in order of first appearance."""
    grouped: Dict[int, List[ShiftReportRow]] = {}
    names: Dict[int, str] = {}
    for r in rows:
        grouped.setdefault(r.user_id, []).append(r)
        names.setdefault(r.user_id, r.name)

    return [
        UserHours(user_id=user_id, name=names[user_id], hours=total_hours(items, calculator=calculator))
        for user_id, items in grouped.items()
    ]


def per_user_breakdown(
    rows: Iterable[ShiftReportRow], *, calculator: Optional[HoursCalculator] = None
) -> Dict[str, str]:
    """Display name -> formatted hours."""
    return {u.name: u.formatted for u in per_user_totals(rows, calculator=calculator)}
