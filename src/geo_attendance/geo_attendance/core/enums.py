from __future__ import annotations

from enum import Enum


class EvaluationOutcome(str, Enum):
    """Terminal state of one check-in evaluation."""

    ADMITTED = "ADMITTED"
    OUTSIDE_RADIUS = "OUTSIDE_RADIUS"
    IDENTITY_UNKNOWN = "IDENTITY_UNKNOWN"
    WINDOW_CLOSED = "WINDOW_CLOSED"
    ZONE_NOT_CONFIGURED = "ZONE_NOT_CONFIGURED"
    INVALID_LOCATION = "INVALID_LOCATION"

    @property
    def is_recordable(self) -> bool:
        """Outcomes that carry a measured distance and are kept as attempts."""
        return self in (EvaluationOutcome.ADMITTED, EvaluationOutcome.OUTSIDE_RADIUS)
