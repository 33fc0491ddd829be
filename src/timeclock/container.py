from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .archive.mysql_archive_repository import MySQLArchiveRepository
from .archive.repository import ArchiveRepository
from .archive.service import ArchivalService
from .database.connection import DatabaseConnection, DBConfig
from .hours.service import HoursService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftTracker
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    shifts_repo: ShiftRepository
    archive_repo: ArchiveRepository

    user_service: UserService
    shift_tracker: ShiftTracker
    hours_service: HoursService
    archival_service: ArchivalService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    users_repo: UserRepository,
    shifts_repo: ShiftRepository,
    archive_repo: ArchiveRepository,
    clock: Optional[Callable[[], datetime]] = None,
    snapshot_monthly: bool = True,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""
    return Container(
        users_repo=users_repo,
        shifts_repo=shifts_repo,
        archive_repo=archive_repo,
        user_service=UserService(users_repo),
        shift_tracker=ShiftTracker(shifts_repo, users_repo, clock=clock),
        hours_service=HoursService(shifts_repo, clock=clock),
        archival_service=ArchivalService(archive_repo, clock=clock, snapshot_monthly=snapshot_monthly),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    clock: Optional[Callable[[], datetime]] = None,
    snapshot_monthly: bool = True,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire(
        users_repo=MySQLUserRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        archive_repo=MySQLArchiveRepository(conn),
        clock=clock,
        snapshot_monthly=snapshot_monthly,
        conn=conn,
    )
