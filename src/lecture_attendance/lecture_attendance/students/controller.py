from __future__ import annotations

from flask import Flask, current_app, jsonify

from ..common.http import json_body
from ..container import Container
from ..sessions.controller import require_lecturer, resolve_lecture_scope
from .model import NewStudent


def _roster_json(students) -> list[dict]:
    return [s.to_dict() for s in students]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/lecture/students", methods=["GET"], endpoint="list_students")
    def list_students():
        lecture_id = resolve_lecture_scope(container)
        students = container.roster_service.list_students(lecture_id)
        return jsonify({"success": True, "students": _roster_json(students)})

    @app.route("/api/lecture/student", methods=["POST"], endpoint="add_student")
    def add_student():
        lecture_id = resolve_lecture_scope(container)
        new = NewStudent.from_payload(
            json_body(),
            require_profile_image=bool(current_app.config.get("REQUIRE_PROFILE_IMAGE", False)),
        )
        students = container.roster_service.add_student(lecture_id, new)
        return (
            jsonify(
                {
                    "success": True,
                    "message": f"Student {new.student_id} added successfully.",
                    "students": _roster_json(students),
                }
            ),
            201,
        )

    @app.route("/api/lecture/student/<student_id>", methods=["DELETE"], endpoint="remove_student")
    def remove_student(student_id: str):
        lecturer = require_lecturer(container)
        students = container.roster_service.remove_student(lecturer.lecture_id, student_id)
        return jsonify(
            {
                "success": True,
                "message": f"Student {student_id} removed.",
                "students": _roster_json(students),
            }
        )
