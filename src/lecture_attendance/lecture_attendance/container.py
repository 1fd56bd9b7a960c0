from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import ConnectionPool, DBConfig
from .lectures.mysql_lecture_repository import MySQLLectureRepository
from .lectures.repository import LectureRepository
from .sessions.service import AuthService
from .sessions.store import SessionStore
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    pool: Optional[ConnectionPool]

    lectures_repo: LectureRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    sessions: SessionStore

    auth_service: AuthService
    roster_service: RosterService
    attendance_service: AttendanceService


def build_container(*, db_config: dict, lecturer_password: str) -> Container:
    pool = ConnectionPool(DBConfig.from_dict(db_config))

    lectures_repo = MySQLLectureRepository(pool)
    students_repo = MySQLStudentRepository(pool)
    attendance_repo = MySQLAttendanceRepository(pool)
    sessions = SessionStore()

    return Container(
        pool=pool,
        lectures_repo=lectures_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        sessions=sessions,
        auth_service=AuthService(lectures_repo, sessions, lecturer_password=lecturer_password),
        roster_service=RosterService(students_repo),
        attendance_service=AttendanceService(attendance_repo),
    )
