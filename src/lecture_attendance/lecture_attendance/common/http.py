from __future__ import annotations

from typing import Any

from flask import request

from ..core.exceptions import ValidationError


def json_body() -> dict[str, Any]:
    """Parse the request body as a JSON object or fail with ValidationError."""

    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("Request body must be JSON.")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")
    return payload
