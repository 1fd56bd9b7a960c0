from __future__ import annotations

from typing import Optional

from ..database.connection import ConnectionPool
from ..database.mysql_base import db_cursor, fetchone
from .model import Lecturer
from .repository import LectureRepository


class MySQLLectureRepository(LectureRepository):
    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    def get_by_email(self, email: str) -> Optional[Lecturer]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                SELECT lecture_id, lecturer_name, lecturer_email
                FROM Lectures
                WHERE lecturer_email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Lecturer(
                lecture_id=row["lecture_id"],
                lecturer_name=row["lecturer_name"],
                lecturer_email=row["lecturer_email"],
            )
