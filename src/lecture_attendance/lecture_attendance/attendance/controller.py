from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .model import CheckIn


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        check_in = CheckIn.from_payload(json_body())
        container.attendance_service.record_check_in(check_in)
        return jsonify({"success": True, "message": "Attendance recorded successfully."}), 201

    @app.route("/api/attendance/<lecture_id>", methods=["GET"], endpoint="todays_attendance")
    def todays_attendance(lecture_id: str):
        rows = container.attendance_service.list_todays_attendance(lecture_id)
        return jsonify({"success": True, "attendance": [r.to_dict() for r in rows]})
