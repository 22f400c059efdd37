from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .attendance.meals import MealEligibilityEngine
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reconciler import RecordReconciler
from .attendance.repository import AttendanceRepository
from .attendance.rules.factory import MealRuleFactory
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_EXPORT_FILENAME, DEFAULT_RATE_YEAR_MAX, DEFAULT_RATE_YEAR_MIN
from .database.connection import DatabaseConnection, DBConfig
from .export.excel_exporter import WorkbookExporter
from .kids.mysql_kid_repository import MySQLKidRepository
from .kids.repository import KidRepository
from .kids.service import KidService
from .rates.mysql_rate_repository import MySQLRateRepository
from .rates.repository import RateRepository
from .rates.service import RateService
from .realtime.hub import SnapshotHub
from .reimbursement.service import ReimbursementReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    """Everything an operation needs, built once and passed explicitly."""

    conn: Optional[DatabaseConnection]
    hub: SnapshotHub

    users_repo: UserRepository
    kids_repo: KidRepository
    attendance_repo: AttendanceRepository
    rates_repo: RateRepository

    auth_service: AuthService
    kid_service: KidService
    attendance_service: AttendanceService
    rate_service: RateService
    report_service: ReimbursementReportService
    exporter: WorkbookExporter

    def close(self) -> None:
        self.hub.close()
        if self.conn is not None:
            self.conn.close()


def assemble(
    *,
    users_repo: UserRepository,
    kids_repo: KidRepository,
    attendance_repo: AttendanceRepository,
    rates_repo: RateRepository,
    conn: Optional[DatabaseConnection] = None,
    meal_windows: Optional[Mapping[str, str]] = None,
    export_dir: str | Path = "exports",
    export_filename: str = DEFAULT_EXPORT_FILENAME,
    rate_year_min: int = DEFAULT_RATE_YEAR_MIN,
    rate_year_max: int = DEFAULT_RATE_YEAR_MAX,
) -> Container:
    hub = SnapshotHub()
    engine = MealEligibilityEngine(MealRuleFactory(meal_windows).build())

    return Container(
        conn=conn,
        hub=hub,
        users_repo=users_repo,
        kids_repo=kids_repo,
        attendance_repo=attendance_repo,
        rates_repo=rates_repo,
        auth_service=AuthService(users_repo),
        kid_service=KidService(kids_repo, hub),
        attendance_service=AttendanceService(
            attendance_repo,
            kids_repo,
            hub,
            reconciler=RecordReconciler(engine),
        ),
        rate_service=RateService(rates_repo, hub, min_year=rate_year_min, max_year=rate_year_max),
        report_service=ReimbursementReportService(attendance_repo, rates_repo),
        exporter=WorkbookExporter(export_dir, filename=export_filename),
    )


def build_container(
    *,
    db_config: dict,
    meal_windows: Optional[Mapping[str, str]] = None,
    export_dir: str | Path = "exports",
    export_filename: str = DEFAULT_EXPORT_FILENAME,
    rate_year_min: int = DEFAULT_RATE_YEAR_MIN,
    rate_year_max: int = DEFAULT_RATE_YEAR_MAX,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return assemble(
        users_repo=MySQLUserRepository(conn),
        kids_repo=MySQLKidRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        rates_repo=MySQLRateRepository(conn),
        conn=conn,
        meal_windows=meal_windows,
        export_dir=export_dir,
        export_filename=export_filename,
        rate_year_min=rate_year_min,
        rate_year_max=rate_year_max,
    )
