from __future__ import annotations

import json
from typing import Optional, Sequence


def serialize_descriptor(descriptor: Sequence[float]) -> str:
    """Turn a face descriptor into the JSON text stored in ``Students.face_descriptor``."""
    return json.dumps(list(descriptor), separators=(",", ":"))


def deserialize_descriptor(raw) -> Optional[list[float]]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, list):
        # JSON columns may already come back decoded.
        return raw
    return json.loads(raw)
