from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, Optional

from ..common.datetime_utils import month_start, now_local, week_start
from ..common.validators import require_user_id
from ..shifts.repository import ShiftRepository
from .aggregator import per_user_breakdown, sum_hours
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator


class HoursService:
    """Windowed hour counters: closed shifts started on or after a period boundary."""

    def __init__(
        self,
        shifts: ShiftRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._shifts = shifts
        self._calculator = calculator or StandardHoursCalculator()
        self._clock = clock or now_local

    def hours_since(self, period_start: datetime, *, user_id: Optional[int] = None) -> str:
        rows = self._shifts.list_closed_since(since=period_start, user_id=user_id)
        return sum_hours(rows, calculator=self._calculator)

    def breakdown_since(self, period_start: datetime) -> Dict[str, str]:
        rows = self._shifts.list_closed_since(since=period_start)
        return per_user_breakdown(rows, calculator=self._calculator)

    def weekly_hours(self, user_id, *, now: datetime | None = None) -> str:
        user_id = require_user_id(user_id)
        return self.hours_since(week_start(now or self._clock()), user_id=user_id)

    def monthly_hours(self, user_id, *, now: datetime | None = None) -> str:
        user_id = require_user_id(user_id)
        return self.hours_since(month_start(now or self._clock()), user_id=user_id)

    def weekly_breakdown(self, *, now: datetime | None = None) -> Dict[str, str]:
        return self.breakdown_since(week_start(now or self._clock()))

    def monthly_breakdown(self, *, now: datetime | None = None) -> Dict[str, str]:
        return self.breakdown_since(month_start(now or self._clock()))
