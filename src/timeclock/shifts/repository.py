from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Shift, ShiftReportRow


class ShiftRepository(Protocol):
    def open_shift(self, *, user_id: int, started_at: datetime) -> Optional[Shift]:
        """Insert an open shift unless the user already has one (then return None).

        The check and the insert must be a single atomic step.
        """

        raise NotImplementedError

    def close_open_shift(self, *, user_id: int, ended_at: datetime) -> Optional[Shift]:
        """Close the user's most recently started open shift; None when there is none.

        The lookup and the update must be a single atomic step.
        """

        raise NotImplementedError

    def get_open_for_user(self, user_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_with_names(self) -> Sequence[ShiftReportRow]:
        """All shifts, newest start first."""

        raise NotImplementedError

    def list_closed_since(self, *, since: datetime, user_id: Optional[int] = None) -> Sequence[ShiftReportRow]:
        """Closed shifts with ``started_at >= since``, optionally for one user."""

        raise NotImplementedError
