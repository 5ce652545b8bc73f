from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_SCHOOL_CITY
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .state import AppState, SyncService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    state: AppState

    classes_repo: ClassRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    sync_service: SyncService
    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    report_service: ReportService


def wire_container(
    *,
    classes_repo: ClassRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    city: str = DEFAULT_SCHOOL_CITY,
) -> Container:
    """Wire services around any set of repositories (MySQL in the app, in-memory in tests)."""
    state = AppState()
    class_service = ClassService(classes_repo, state)

    return Container(
        conn=conn,
        state=state,
        classes_repo=classes_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        sync_service=SyncService(state, classes_repo, students_repo, attendance_repo),
        class_service=class_service,
        student_service=StudentService(students_repo, state),
        attendance_service=AttendanceService(attendance_repo, state),
        dashboard_service=DashboardService(state, class_service),
        report_service=ReportService(state, city=city),
    )


def build_container(*, db_config: dict, city: str = DEFAULT_SCHOOL_CITY) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))

    return wire_container(
        classes_repo=MySQLClassRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        city=city,
    )
