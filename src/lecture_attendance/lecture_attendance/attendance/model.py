from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Any, Mapping, Optional, Union

from ..common.validators import optional_coordinate, optional_text, require_non_empty
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CheckIn:
    """Validated body of a check-in POST from the face-matching client.

    The date and time are not part of it: MySQL assigns both on insert.
    """

    student_id: str
    lecture_id: str
    image_data_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CheckIn":
        if payload.get("studentId") in (None, "") or payload.get("lectureId") in (None, ""):
            raise ValidationError("Missing student ID or lecture ID.")
        return cls(
            student_id=require_non_empty(payload.get("studentId"), "studentId"),
            lecture_id=require_non_empty(payload.get("lectureId"), "lectureId"),
            image_data_url=optional_text(payload.get("imageDataUrl"), "imageDataUrl"),
            latitude=optional_coordinate(payload.get("latitude"), "latitude", limit=90),
            longitude=optional_coordinate(payload.get("longitude"), "longitude", limit=180),
        )


@dataclass(frozen=True)
class TodayAttendanceRow:
    """Read-model for the live check-in feed (joined with the roster)."""

    student_id: str
    first_name: str
    last_name: str
    check_in_time: Union[datetime, time, timedelta]
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    check_in_image: Optional[str] = None
    image_type: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "check_in_time": format_clock(self.check_in_time),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "check_in_image": self.check_in_image,
            "image_type": self.image_type,
        }


def format_clock(value: Union[datetime, time, timedelta, None]) -> Optional[str]:
    """Render a check-in time as HH:MM:SS.

    mysql-connector returns TIMESTAMP as datetime and TIME as timedelta.
    """

    if value is None:
        return None
    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return f"{total_seconds // 3600:02d}:{(total_seconds % 3600) // 60:02d}:{total_seconds % 60:02d}"
    return value.strftime("%H:%M:%S")
