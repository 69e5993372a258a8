from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import EvaluationOutcome
from ..geo.calculator.base import DistanceCalculator
from ..geo.calculator.haversine_calculator import HaversineDistanceCalculator
from ..geo.model import GeoPoint
from ..settings.repository import ConfigStore
from ..students.model import StudentIdentity
from ..students.repository import IdentityLookup
from .model import GateDecision

logger = logging.getLogger(__name__)


class AttendanceGate:
    """Decides whether one check-in attempt is admitted.

    Holds no state of its own: zone and window are read from the config store on
    every call, and nothing is written. Expected rejections come back as a
    `GateDecision`; collaborator failures propagate unchanged.

    Steps run in a fixed order and the first failing one wins:
    identity -> window -> zone -> location -> distance.
    """

    def __init__(
        self,
        identities: IdentityLookup,
        config: ConfigStore,
        *,
        calculator: Optional[DistanceCalculator] = None,
    ):
        self._identities = identities
        self._config = config
        self._calculator = calculator or HaversineDistanceCalculator()

    def evaluate(self, identity: StudentIdentity, location: GeoPoint) -> GateDecision:
        known = self._identities.exists(identity.prn)
        if not known:
            # No distance here: unregistered callers learn nothing about the zone.
            return GateDecision(outcome=EvaluationOutcome.IDENTITY_UNKNOWN)

        if not self._config.get_window():
            return GateDecision(outcome=EvaluationOutcome.WINDOW_CLOSED, identity=known)

        zone = self._config.get_zone()
        if zone is None or zone.is_unset:
            return GateDecision(outcome=EvaluationOutcome.ZONE_NOT_CONFIGURED, identity=known)

        if not location.is_valid:
            return GateDecision(outcome=EvaluationOutcome.INVALID_LOCATION, identity=known)

        distance = self._calculator.distance(location, zone.center)
        admitted = distance <= zone.radius_meters
        logger.debug(
            "prn=%s distance=%.2fm radius=%.2fm admitted=%s",
            known.prn,
            distance,
            zone.radius_meters,
            admitted,
        )
        return GateDecision(
            outcome=EvaluationOutcome.ADMITTED if admitted else EvaluationOutcome.OUTSIDE_RADIUS,
            admitted=admitted,
            distance_meters=distance,
            identity=known,
        )
