from __future__ import annotations

from .base import HoursCalculator, TimedShift


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (end - start) in fractional hours; open shifts count 0, never below 0."""

    def elapsed_hours(self, shift: TimedShift) -> float:
        if not shift.started_at or not shift.ended_at:
            return 0.0
        hours = (shift.ended_at - shift.started_at).total_seconds() / 3600
        return max(hours, 0.0)
