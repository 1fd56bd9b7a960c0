from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import ConnectionPool
from ..database.mysql_base import as_float, db_cursor, fetchall
from .model import TodayAttendanceRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, pool: ConnectionPool):
        self._pool = pool

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
        # lecture_date and check_in_time come from the server clock, never the client.
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                INSERT INTO AttendanceRecords(student_id, lecture_id, lecture_date, is_manual,
                                              check_in_image, image_type, latitude, longitude)
                VALUES(%s,%s,CURDATE(),%s,%s,%s,%s,%s)
                """,
                (student_id, lecture_id, bool(is_manual), check_in_image, image_type, latitude, longitude),
            )
            return int(cur.lastrowid)

    def list_for_today(self, lecture_id: str) -> Sequence[TodayAttendanceRow]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                SELECT ar.student_id, s.first_name, s.last_name, ar.check_in_time,
                       ar.latitude, ar.longitude, ar.check_in_image, ar.image_type
                FROM AttendanceRecords ar
                JOIN Students s ON s.student_id = ar.student_id AND s.lecture_id = ar.lecture_id
                WHERE ar.lecture_id=%s AND ar.lecture_date = CURDATE()
                ORDER BY ar.check_in_time DESC, ar.attendance_id DESC
                """,
                (lecture_id,),
            )
            rows = fetchall(cur)
            return [
                TodayAttendanceRow(
                    student_id=r["student_id"],
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    check_in_time=r["check_in_time"],
                    latitude=as_float(r.get("latitude")),
                    longitude=as_float(r.get("longitude")),
                    check_in_image=r.get("check_in_image"),
                    image_type=r.get("image_type"),
                )
                for r in rows
            ]
