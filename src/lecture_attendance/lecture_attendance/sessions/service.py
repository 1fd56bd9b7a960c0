from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError
from ..lectures.model import Lecturer
from ..lectures.repository import LectureRepository
from .model import LoginRequest
from .store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: lecturer login/logout and token lookup.

    Every lecturer shares one configured password; the email picks the lecture.
    """

    def __init__(self, lectures: LectureRepository, sessions: SessionStore, *, lecturer_password: str):
        if not lecturer_password:
            raise ValueError("lecturer_password must be configured")
        self._lectures = lectures
        self._sessions = sessions
        self._password_hash = generate_password_hash(lecturer_password)

    def login(self, request: LoginRequest) -> tuple[str, Lecturer]:
        if not check_password_hash(self._password_hash, request.password):
            logger.warning("Login rejected for %s: bad password", request.email)
            raise AuthenticationError("Invalid email or password.")

        lecturer = self._lectures.get_by_email(request.email)
        if not lecturer:
            logger.warning("Login rejected for %s: no lecture", request.email)
            raise AuthenticationError("Lecturer not found.")

        token = self._sessions.put(lecturer)
        logger.info("Lecturer %s logged in for %s", lecturer.lecturer_email, lecturer.lecture_id)
        return token, lecturer

    def logout(self, token: Optional[str]) -> None:
        if token:
            self._sessions.discard(token)

    def resolve_caller(self, token: Optional[str]) -> Optional[Lecturer]:
        if not token:
            return None
        return self._sessions.get(token)
