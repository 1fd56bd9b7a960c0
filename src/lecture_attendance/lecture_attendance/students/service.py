from __future__ import annotations

import logging
from typing import Sequence

from ..common.descriptors import serialize_descriptor
from ..common.validators import require_non_empty
from ..core.enums import ImageType
from ..core.exceptions import ConflictError, NotFoundError
from .model import NewStudent, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: manage the roster of one lecture section.

    Every operation takes the lecture explicitly; the caller decides which
    lecture a request is scoped to.
    """

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(self, lecture_id: str) -> Sequence[Student]:
        lecture_id = require_non_empty(lecture_id, "lectureId")
        return self._students.list_for_lecture(lecture_id)

    def add_student(self, lecture_id: str, new: NewStudent) -> Sequence[Student]:
        lecture_id = require_non_empty(lecture_id, "lectureId")

        try:
            self._students.create_student(
                lecture_id=lecture_id,
                student_id=new.student_id,
                first_name=new.first_name,
                last_name=new.last_name,
                face_descriptor=serialize_descriptor(new.face_descriptor),
                profile_image=new.profile_image,
                image_type=ImageType.BASE64.value if new.profile_image else None,
            )
        except ConflictError as exc:
            logger.warning("Duplicate enrollment of %s in %s", new.student_id, lecture_id)
            raise ConflictError(f"Student ID {new.student_id} already exists.") from exc
        except NotFoundError as exc:
            raise NotFoundError(f"Lecture {lecture_id} does not exist.") from exc

        logger.info("Student %s added to %s", new.student_id, lecture_id)
        return self._students.list_for_lecture(lecture_id)

    def remove_student(self, lecture_id: str, student_id: str) -> Sequence[Student]:
        lecture_id = require_non_empty(lecture_id, "lectureId")
        student_id = require_non_empty(student_id, "studentId")

        attendance_removed = self._students.delete_with_attendance(lecture_id=lecture_id, student_id=student_id)
        logger.info(
            "Student %s removed from %s with %d attendance records",
            student_id,
            lecture_id,
            attendance_removed,
        )
        # Read after commit, outside the transaction.
        return self._students.list_for_lecture(lecture_id)
