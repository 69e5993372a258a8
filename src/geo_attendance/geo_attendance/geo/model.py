from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """A position in decimal degrees.

    Construction never validates; callers check `is_valid` before using a
    submitted point.
    """

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        lat, lng = self.latitude, self.longitude
        if not (math.isfinite(lat) and math.isfinite(lng)):
            return False
        return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0

    @property
    def is_origin(self) -> bool:
        return self.latitude == 0 and self.longitude == 0

    def to_dict(self) -> dict:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True)
class AllowedZone:
    """The single active geofence: a circle around `center`."""

    center: GeoPoint
    radius_meters: float

    @property
    def is_unset(self) -> bool:
        # A center at (0, 0) is the "never configured" placeholder.
        return self.center.is_origin

    def to_dict(self) -> dict:
        return {"lat": self.center.latitude, "lng": self.center.longitude, "radius": self.radius_meters}

    @classmethod
    def from_dict(cls, data: dict) -> "AllowedZone":
        return cls(
            center=GeoPoint(latitude=float(data["lat"]), longitude=float(data["lng"])),
            radius_meters=float(data["radius"]),
        )
