from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional

from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def require_non_empty(value: Any, field_name: str) -> str:
    if is_blank(value) or isinstance(value, (bool, list, tuple, dict)):
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_number_vector(value: Any, field_name: str) -> list[float]:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list of numbers")
    for item in value:
        # bool is a Real subclass; reject it explicitly.
        if isinstance(item, bool) or not isinstance(item, Real):
            raise ValidationError(f"{field_name} must be a list of numbers")
        if not math.isfinite(item):
            raise ValidationError(f"{field_name} must contain only finite numbers")
    return list(value)


def optional_coordinate(value: Any, field_name: str, *, limit: float) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not -limit <= number <= limit:
        raise ValidationError(f"{field_name} must be between {-limit:g} and {limit:g}")
    return number
