from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Roster storage.

    Note: the service layer depends on this interface, not on MySQL directly.
    """

    def list_for_lecture(self, lecture_id: str) -> Sequence[Student]:
        raise NotImplementedError

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
        """Insert one student; raises ConflictError if the pair already exists."""

        raise NotImplementedError

    def delete_with_attendance(self, *, lecture_id: str, student_id: str) -> int:
        """Delete the student and their attendance rows in one transaction.

        Returns the number of attendance rows removed. Raises NotFoundError,
        with nothing deleted, if the student is not in the lecture.
        """

        raise NotImplementedError
