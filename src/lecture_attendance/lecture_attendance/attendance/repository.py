from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TodayAttendanceRow


class AttendanceRepository(Protocol):
    def create_checkin(
        self,
        *,
        student_id: str,
        lecture_id: str,
        check_in_image: Optional[str],
        image_type: Optional[str],
        latitude: Optional[float],
        longitude: Optional[float],
        is_manual: bool = False,
    ) -> int:
        raise NotImplementedError

    def list_for_today(self, lecture_id: str) -> Sequence[TodayAttendanceRow]:
        """Today's check-ins for the lecture, newest first."""

        raise NotImplementedError
