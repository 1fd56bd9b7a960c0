from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.http import json_body
from ..container import Container
from ..core.constants import SESSION_HEADER
from ..core.exceptions import AuthenticationError
from ..lectures.model import Lecturer
from .model import LoginRequest


def current_token():
    return request.headers.get(SESSION_HEADER)


def require_lecturer(container: Container) -> Lecturer:
    lecturer = container.auth_service.resolve_caller(current_token())
    if not lecturer:
        raise AuthenticationError("Unauthorized: Please log in.")
    return lecturer


def resolve_lecture_scope(container: Container) -> str:
    """Lecture the request acts on.

    A logged-in lecturer acts on their own lecture. Without a session header the
    configured single-section lecture is used; if none is configured the
    request is rejected.
    """

    token = current_token()
    if token:
        # A stale token must not fall through to the default lecture.
        lecturer = container.auth_service.resolve_caller(token)
        if not lecturer:
            raise AuthenticationError("Session expired: Please log in again.")
        return lecturer.lecture_id

    default_lecture_id = current_app.config.get("DEFAULT_LECTURE_ID")
    if not default_lecture_id:
        raise AuthenticationError("Unauthorized: Please log in.")
    return default_lecture_id


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        login_request = LoginRequest.from_payload(json_body())
        token, lecturer = container.auth_service.login(login_request)
        return jsonify(
            {
                "success": True,
                "message": "Login successful",
                "sessionId": token,
                "lecturer": lecturer.to_dict(),
            }
        )

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout(current_token())
        return jsonify({"success": True, "message": "Logged out successfully."})
