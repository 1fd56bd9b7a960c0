from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.validators import optional_text, require_non_empty, require_number_vector
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Student:
    """A student enrolled in one lecture section.

    ``student_id`` is unique within ``lecture_id`` only. The face descriptor is
    produced and matched by the client; the server stores it as-is.
    """

    student_id: str
    lecture_id: str
    first_name: str
    last_name: str
    face_descriptor: Optional[list[float]]
    profile_image: Optional[str] = None
    image_type: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "lecture_id": self.lecture_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "face_descriptor": self.face_descriptor,
            "profile_image": self.profile_image,
            "image_type": self.image_type,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class NewStudent:
    """Validated body of an enrollment request."""

    student_id: str
    first_name: str
    last_name: str
    face_descriptor: list[float]
    profile_image: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, require_profile_image: bool = False) -> "NewStudent":
        missing = [
            name
            for name in ("studentId", "firstName", "lastName", "faceDescriptor")
            + (("profileImage",) if require_profile_image else ())
            if payload.get(name) in (None, "", [])
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        return cls(
            student_id=require_non_empty(payload.get("studentId"), "studentId"),
            first_name=require_non_empty(payload.get("firstName"), "firstName"),
            last_name=require_non_empty(payload.get("lastName"), "lastName"),
            face_descriptor=require_number_vector(payload.get("faceDescriptor"), "faceDescriptor"),
            profile_image=optional_text(payload.get("profileImage"), "profileImage"),
        )
