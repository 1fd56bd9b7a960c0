from __future__ import annotations

import threading
import uuid
from typing import Optional

from ..lectures.model import Lecturer


class SessionStore:
    """In-memory token -> lecturer map for the lifetime of the process.

    Only AuthService touches it. Sessions do not survive a restart.
    """

    def __init__(self):
        self._sessions: dict[str, Lecturer] = {}
        self._lock = threading.Lock()

    def put(self, lecturer: Lecturer) -> str:
        token = str(uuid.uuid4())
        with self._lock:
            self._sessions[token] = lecturer
        return token

    def get(self, token: str) -> Optional[Lecturer]:
        with self._lock:
            return self._sessions.get(token)

    def discard(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
