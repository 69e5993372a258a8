from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StudentIdentity:
    """Domain entity: a registered student, keyed by PRN."""

    prn: str
    display_name: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {"prn": self.prn, "display_name": self.display_name}
