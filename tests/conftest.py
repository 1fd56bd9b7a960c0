from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.lecture_attendance.lecture_attendance.attendance.model import TodayAttendanceRow
from src.lecture_attendance.lecture_attendance.attendance.service import AttendanceService
from src.lecture_attendance.lecture_attendance.common.descriptors import deserialize_descriptor
from src.lecture_attendance.lecture_attendance.container import Container
from src.lecture_attendance.lecture_attendance.core.exceptions import ConflictError, NotFoundError
from src.lecture_attendance.lecture_attendance.lectures.model import Lecturer
from src.lecture_attendance.lecture_attendance.main import create_app
from src.lecture_attendance.lecture_attendance.sessions.service import AuthService
from src.lecture_attendance.lecture_attendance.sessions.store import SessionStore
from src.lecture_attendance.lecture_attendance.students.model import Student
from src.lecture_attendance.lecture_attendance.students.service import RosterService

TEST_PASSWORD = "test-password"


class InMemoryDatabase:
    """Shared rows behind the in-memory repositories, with a controllable clock."""

    def __init__(self, today: date):
        self.today = today
        self.clock = datetime.combine(today, datetime.min.time()).replace(hour=9)
        self.lectures: dict[str, Lecturer] = {}
        self.students: dict[tuple[str, str], dict] = {}
        self.attendance: list[dict] = []
        self._next_attendance_id = 1

    def tick(self) -> datetime:
        self.clock += timedelta(seconds=1)
        return self.clock

    def add_attendance_row(self, *, student_id: str, lecture_id: str, lecture_date: date, check_in_time: datetime, **extra) -> int:
        row = {
            "attendance_id": self._next_attendance_id,
            "student_id": student_id,
            "lecture_id": lecture_id,
            "lecture_date": lecture_date,
            "check_in_time": check_in_time,
            "is_manual": False,
            "check_in_image": extra.get("check_in_image"),
            "image_type": extra.get("image_type"),
            "latitude": extra.get("latitude"),
            "longitude": extra.get("longitude"),
        }
        self._next_attendance_id += 1
        self.attendance.append(row)
        return row["attendance_id"]


class InMemoryLectures:
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    def get_by_email(self, email: str) -> Optional[Lecturer]:
        for lecturer in self._db.lectures.values():
            if lecturer.lecturer_email == email:
                return lecturer
        return None


class InMemoryStudents:
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    def list_for_lecture(self, lecture_id: str):
        rows = [r for (_, lid), r in self._db.students.items() if lid == lecture_id]
        rows.sort(key=lambda r: (r["created_at"], r["student_id"]))
        return [
            Student(
                student_id=r["student_id"],
                lecture_id=r["lecture_id"],
                first_name=r["first_name"],
                last_name=r["last_name"],
                face_descriptor=deserialize_descriptor(r["face_descriptor"]),
                profile_image=r["profile_image"],
                image_type=r["image_type"],
                created_at=r["created_at"],
            )
            for r in rows
        ]

    def create_student(self, *, lecture_id, student_id, first_name, last_name, face_descriptor, profile_image, image_type):
        if lecture_id not in self._db.lectures:
            raise NotFoundError("Referenced record does not exist.")
        if (student_id, lecture_id) in self._db.students:
            raise ConflictError("Record already exists.")
        assert isinstance(face_descriptor, str)
        self._db.students[(student_id, lecture_id)] = {
            "student_id": student_id,
            "lecture_id": lecture_id,
            "first_name": first_name,
            "last_name": last_name,
            "face_descriptor": face_descriptor,
            "profile_image": profile_image,
            "image_type": image_type,
            "created_at": self._db.tick(),
        }

    def delete_with_attendance(self, *, lecture_id, student_id) -> int:
        if (student_id, lecture_id) not in self._db.students:
            raise NotFoundError("Student not found or not in this lecture.")
        before = len(self._db.attendance)
        self._db.attendance = [
            r for r in self._db.attendance if not (r["student_id"] == student_id and r["lecture_id"] == lecture_id)
        ]
        del self._db.students[(student_id, lecture_id)]
        return before - len(self._db.attendance)


class InMemoryAttendance:
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    def create_checkin(self, *, student_id, lecture_id, check_in_image, image_type, latitude, longitude, is_manual=False) -> int:
        if (student_id, lecture_id) not in self._db.students:
            raise NotFoundError("Referenced record does not exist.")
        return self._db.add_attendance_row(
            student_id=student_id,
            lecture_id=lecture_id,
            lecture_date=self._db.today,
            check_in_time=self._db.tick(),
            check_in_image=check_in_image,
            image_type=image_type,
            latitude=latitude,
            longitude=longitude,
        )

    def list_for_today(self, lecture_id: str):
        rows = [
            r
            for r in self._db.attendance
            if r["lecture_id"] == lecture_id
            and r["lecture_date"] == self._db.today
            and (r["student_id"], lecture_id) in self._db.students
        ]
        rows.sort(key=lambda r: (r["check_in_time"], r["attendance_id"]), reverse=True)
        out = []
        for r in rows:
            student = self._db.students[(r["student_id"], lecture_id)]
            out.append(
                TodayAttendanceRow(
                    student_id=r["student_id"],
                    first_name=student["first_name"],
                    last_name=student["last_name"],
                    check_in_time=r["check_in_time"],
                    latitude=r["latitude"],
                    longitude=r["longitude"],
                    check_in_image=r["check_in_image"],
                    image_type=r["image_type"],
                )
            )
        return out


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 2, 2)


@pytest.fixture
def db(fixed_today) -> InMemoryDatabase:
    database = InMemoryDatabase(fixed_today)
    database.lectures["CS101_L1"] = Lecturer(
        lecture_id="CS101_L1",
        lecturer_name="Demo Lecturer",
        lecturer_email="lecturer@example.com",
    )
    database.lectures["MATH200_L2"] = Lecturer(
        lecture_id="MATH200_L2",
        lecturer_name="Other Lecturer",
        lecturer_email="other@example.com",
    )
    return database


@pytest.fixture
def container(db) -> Container:
    lectures_repo = InMemoryLectures(db)
    students_repo = InMemoryStudents(db)
    attendance_repo = InMemoryAttendance(db)
    sessions = SessionStore()
    return Container(
        pool=None,
        lectures_repo=lectures_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        sessions=sessions,
        auth_service=AuthService(lectures_repo, sessions, lecturer_password=TEST_PASSWORD),
        roster_service=RosterService(students_repo),
        attendance_service=AttendanceService(attendance_repo),
    )


@pytest.fixture
def app(container):
    flask_app = create_app(container, settings_module="config.testing")
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    resp = client.post("/api/login", json={"email": "lecturer@example.com", "password": TEST_PASSWORD})
    assert resp.status_code == 200
    return {"X-Session-Id": resp.get_json()["sessionId"]}
