from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import parse_coordinate, require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from ..core.exceptions import ValidationError
from ..geo.model import GeoPoint
from ..students.model import StudentIdentity
from .gate import AttendanceGate
from .model import CheckInAttempt, GateDecision
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: a student checks in from their current position.

    The gate decides; this service persists the attempt afterwards. If any
    collaborator call fails the exception propagates and nothing is saved.
    """

    def __init__(self, gate: AttendanceGate, attendance: AttendanceRepository):
        self._gate = gate
        self._attendance = attendance

    @staticmethod
    def _submission(
        prn: str, display_name: Optional[str], latitude: Any, longitude: Any
    ) -> tuple[StudentIdentity, GeoPoint]:
        # The PRN is opaque here; whether it exists is the registry's call.
        identity = StudentIdentity(
            prn=require_non_empty(prn, "PRN"),
            display_name=(display_name or "").strip(),
        )
        location = GeoPoint(
            latitude=parse_coordinate(latitude, "Latitude"),
            longitude=parse_coordinate(longitude, "Longitude"),
        )
        return identity, location

    def check_in(
        self,
        *,
        prn: str,
        latitude: Any,
        longitude: Any,
        display_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> GateDecision:
        identity, location = self._submission(prn, display_name, latitude, longitude)
        now = now or now_utc()

        decision = self._gate.evaluate(identity, location)
        logger.info("Check-in prn=%s outcome=%s", identity.prn, decision.outcome.value)

        # Only attempts with a measured distance are kept; unknown PRNs and
        # closed-window/unset-zone rejections are reported but not recorded.
        if decision.outcome.is_recordable:
            attempt = CheckInAttempt(
                identity=decision.identity or identity,
                submitted_at=now,
                location=location,
                distance_meters=float(decision.distance_meters),
                admitted=decision.admitted,
                outcome=decision.outcome,
            )
            self._attendance.save(attempt)

        return decision

    def preview(
        self, *, prn: str, latitude: Any, longitude: Any, display_name: Optional[str] = None
    ) -> GateDecision:
        """Same evaluation as `check_in` without recording anything."""
        identity, location = self._submission(prn, display_name, latitude, longitude)
        return self._gate.evaluate(identity, location)

    def history(self, prn: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[CheckInAttempt]:
        limit = int(limit)
        if limit < 1:
            raise ValidationError("limit must be a positive number")
        return self._attendance.get_recent_for_student(
            require_non_empty(prn, "PRN"), min(limit, MAX_HISTORY_LIMIT)
        )

    def list_records(self) -> Sequence[CheckInAttempt]:
        return self._attendance.list_all()

    def clear_records(self) -> int:
        removed = self._attendance.clear_all()
        logger.warning("Cleared %d attendance records", removed)
        return removed
