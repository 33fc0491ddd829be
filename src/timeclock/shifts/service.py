from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_user_id
from ..core.exceptions import StateError, ValidationError
from ..users.repository import UserRepository
from .model import Shift, ShiftReportRow
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftTracker:
    """Use case: clock in / clock out, at most one open shift per user."""

    def __init__(
        self,
        shifts: ShiftRepository,
        users: UserRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._shifts = shifts
        self._users = users
        self._clock = clock or now_local

    def _require_user(self, user_id) -> int:
        user_id = require_user_id(user_id)
        if not self._users.get_by_id(user_id):
            raise ValidationError("Usuario no encontrado")
        return user_id

    def clock_in(self, user_id, *, now: datetime | None = None) -> Shift:
        user_id = self._require_user(user_id)
        now = now or self._clock()

        shift = self._shifts.open_shift(user_id=user_id, started_at=now)
        if shift is None:
            raise StateError("Ya hay un turno activo")

        logger.info("User %s clocked in (shift %s)", user_id, shift.shift_id)
        return shift

    def clock_out(self, user_id, *, now: datetime | None = None) -> Shift:
        """Close the open shift; the returned shift carries ``elapsed_minutes``."""
        user_id = require_user_id(user_id)
        now = now or self._clock()

        shift = self._shifts.close_open_shift(user_id=user_id, ended_at=now)
        if shift is None:
            raise StateError("No hay turno activo")

        logger.info("User %s clocked out (shift %s, %.2f min)", user_id, shift.shift_id, shift.elapsed_minutes)
        return shift

    def current_shift(self, user_id) -> Optional[Shift]:
        return self._shifts.get_open_for_user(require_user_id(user_id))

    def list_records(self) -> Sequence[ShiftReportRow]:
        return self._shifts.list_with_names()
