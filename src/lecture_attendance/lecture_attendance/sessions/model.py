from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_non_empty


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LoginRequest":
        return cls(
            email=require_non_empty(payload.get("email"), "email"),
            password=require_non_empty(payload.get("password"), "password"),
        )
