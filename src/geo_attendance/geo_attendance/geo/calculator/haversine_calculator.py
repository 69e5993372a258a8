from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

from ...core.constants import EARTH_RADIUS_METERS
from ..model import GeoPoint
from .base import DistanceCalculator


class HaversineDistanceCalculator(DistanceCalculator):
    """Great-circle distance on a sphere of mean Earth radius.

    Pure function of the two points. Inputs are not validated here.
    """

    def __init__(self, radius_meters: float = EARTH_RADIUS_METERS):
        self._radius = float(radius_meters)

    def distance(self, a: GeoPoint, b: GeoPoint) -> float:
        lat1, lat2 = radians(a.latitude), radians(b.latitude)
        dphi = radians(b.latitude - a.latitude)
        dlambda = radians(b.longitude - a.longitude)

        h = sin(dphi / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlambda / 2) ** 2
        # Rounding can push h just outside [0, 1] for antipodal or identical points.
        h = min(1.0, max(0.0, h))

        c = 2 * atan2(sqrt(h), sqrt(1 - h))
        return self._radius * c
