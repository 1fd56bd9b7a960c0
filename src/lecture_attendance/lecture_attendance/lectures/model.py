from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Lecturer:
    """A lecturer and the one lecture section they own.

    Lectures are pre-seeded; this service only reads them.
    """

    lecture_id: str
    lecturer_name: str
    lecturer_email: str

    def to_dict(self) -> dict:
        return asdict(self)
