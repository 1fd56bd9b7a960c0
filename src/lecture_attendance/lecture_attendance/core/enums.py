from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Failure kinds reported to API callers."""

    VALIDATION_FAILED = "ValidationFailed"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    QUERY_FAILED = "QueryFailed"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"


class ImageType(str, Enum):
    """Encoding tag stored next to image payloads."""

    BASE64 = "base64"
