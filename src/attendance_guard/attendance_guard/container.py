from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import CalendarService
from .database.connection import DatabaseConnection, DBConfig
from .export.service import ExportService
from .semester.service import SemesterService
from .snapshots.mysql_snapshot_repository import MySQLSnapshotRepository
from .snapshots.repository import SnapshotRepository
from .stats.service import DashboardService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    snapshots_repo: SnapshotRepository

    auth_service: AuthService
    semester_service: SemesterService
    calendar_service: CalendarService
    dashboard_service: DashboardService
    export_service: ExportService


def build_services(*, users_repo: UserRepository, snapshots_repo: SnapshotRepository) -> Container:
    return Container(
        users_repo=users_repo,
        snapshots_repo=snapshots_repo,
        auth_service=AuthService(users_repo, snapshots_repo),
        semester_service=SemesterService(snapshots_repo),
        calendar_service=CalendarService(snapshots_repo),
        dashboard_service=DashboardService(snapshots_repo),
        export_service=ExportService(snapshots_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        snapshots_repo=MySQLSnapshotRepository(conn),
    )
