from __future__ import annotations

from typing import Optional, Sequence

from ..common.descriptors import deserialize_descriptor
from ..core.exceptions import NotFoundError
from ..database.connection import ConnectionPool
from ..database.mysql_base import db_cursor, db_transaction, fetchall
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    def list_for_lecture(self, lecture_id: str) -> Sequence[Student]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                SELECT student_id, lecture_id, first_name, last_name, face_descriptor,
                       profile_image, image_type, created_at
                FROM Students
                WHERE lecture_id=%s
                ORDER BY created_at ASC, student_id ASC
                """,
                (lecture_id,),
            )
            rows = fetchall(cur)
            return [
                Student(
                    student_id=r["student_id"],
                    lecture_id=r["lecture_id"],
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    face_descriptor=deserialize_descriptor(r.get("face_descriptor")),
                    profile_image=r.get("profile_image"),
                    image_type=r.get("image_type"),
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]

    def create_student(
        self,
        *,
        lecture_id: str,
        student_id: str,
        first_name: str,
        last_name: str,
        face_descriptor: str,
        profile_image: Optional[str],
        image_type: Optional[str],
    ) -> None:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                INSERT INTO Students(student_id, first_name, last_name, lecture_id, face_descriptor,
                                     profile_image, image_type)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (student_id, first_name, last_name, lecture_id, face_descriptor, profile_image, image_type),
            )

    def delete_with_attendance(self, *, lecture_id: str, student_id: str) -> int:
        with db_transaction(self._pool) as (_, cur):
            # Attendance rows reference the student, so they go first.
            cur.execute(
                "DELETE FROM AttendanceRecords WHERE student_id=%s AND lecture_id=%s",
                (student_id, lecture_id),
            )
            attendance_removed = cur.rowcount

            cur.execute(
                "DELETE FROM Students WHERE student_id=%s AND lecture_id=%s",
                (student_id, lecture_id),
            )
            if cur.rowcount == 0:
                raise NotFoundError("Student not found or not in this lecture.")

            return attendance_removed
