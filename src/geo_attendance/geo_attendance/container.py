from __future__ import annotations

from dataclasses import dataclass

from .analytics.service import AnalyticsService
from .attendance.gate import AttendanceGate
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_WINDOW_OPEN
from .database.connection import DBConfig, DatabaseConnection
from .geo.calculator.haversine_calculator import HaversineDistanceCalculator
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.service import SettingsService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: MySQLStudentRepository
    settings_repo: MySQLSettingsRepository
    attendance_repo: MySQLAttendanceRepository

    gate: AttendanceGate
    attendance_service: AttendanceService
    settings_service: SettingsService
    student_service: StudentService
    analytics_service: AnalyticsService


def build_container(*, db_config: dict, default_window_open: bool = DEFAULT_WINDOW_OPEN) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    students_repo = MySQLStudentRepository(conn)
    settings_repo = MySQLSettingsRepository(conn, default_window_open=default_window_open)
    attendance_repo = MySQLAttendanceRepository(conn)

    gate = AttendanceGate(students_repo, settings_repo, calculator=HaversineDistanceCalculator())

    return Container(
        conn=conn,
        students_repo=students_repo,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        gate=gate,
        attendance_service=AttendanceService(gate, attendance_repo),
        settings_service=SettingsService(settings_repo),
        student_service=StudentService(students_repo),
        analytics_service=AnalyticsService(attendance_repo),
    )
