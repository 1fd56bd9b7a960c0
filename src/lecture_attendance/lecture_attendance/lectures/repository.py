from __future__ import annotations

from typing import Optional, Protocol

from .model import Lecturer


class LectureRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[Lecturer]:
        raise NotImplementedError
