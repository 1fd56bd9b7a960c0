from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.enums import ImageType
from ..core.exceptions import NotFoundError
from .model import CheckIn, TodayAttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record check-ins and serve today's feed.

    Repeated check-ins by the same student are all stored; there is no dedup.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_check_in(self, check_in: CheckIn) -> int:
        try:
            attendance_id = self._attendance.create_checkin(
                student_id=check_in.student_id,
                lecture_id=check_in.lecture_id,
                check_in_image=check_in.image_data_url,
                image_type=ImageType.BASE64.value if check_in.image_data_url else None,
                latitude=check_in.latitude,
                longitude=check_in.longitude,
                is_manual=False,
            )
        except NotFoundError as exc:
            logger.warning("Check-in for unknown student %s in %s", check_in.student_id, check_in.lecture_id)
            raise NotFoundError(
                f"Student {check_in.student_id} is not enrolled in {check_in.lecture_id}."
            ) from exc

        logger.info("Check-in %s recorded for %s in %s", attendance_id, check_in.student_id, check_in.lecture_id)
        return attendance_id

    def list_todays_attendance(self, lecture_id: str) -> Sequence[TodayAttendanceRow]:
        lecture_id = require_non_empty(lecture_id, "lectureId")
        return self._attendance.list_for_today(lecture_id)
