from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EvaluationOutcome
from ..geo.model import GeoPoint
from ..students.model import StudentIdentity


@dataclass(frozen=True)
class GateDecision:
    """Result of one evaluation. `distance_meters` is None unless a distance was computed."""

    outcome: EvaluationOutcome
    admitted: bool = False
    distance_meters: Optional[float] = None
    identity: Optional[StudentIdentity] = None

    def to_dict(self) -> dict:
        return {
            "admitted": self.admitted,
            "distance_meters": self.distance_meters,
            "outcome": self.outcome.value,
        }


@dataclass(frozen=True)
class CheckInAttempt:
    """Domain entity: one recorded check-in attempt. Never mutated after creation."""

    identity: StudentIdentity
    submitted_at: datetime
    location: GeoPoint
    distance_meters: float
    admitted: bool
    outcome: EvaluationOutcome
    attempt_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "attempt_id": self.attempt_id,
            "prn": self.identity.prn,
            "full_name": self.identity.display_name,
            "timestamp": self.submitted_at.isoformat(),
            "location": self.location.to_dict(),
            "distance_meters": self.distance_meters,
            "admitted": self.admitted,
            "outcome": self.outcome.value,
        }
