from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_latitude, require_longitude, require_radius
from ..core.exceptions import ValidationError
from ..geo.model import AllowedZone, GeoPoint
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceStatusView:
    window_open: bool
    zone_configured: bool
    zone: Optional[AllowedZone]

    def to_dict(self) -> dict:
        return {
            "window_open": self.window_open,
            "zone_configured": self.zone_configured,
            "zone": self.zone.to_dict() if self.zone else None,
        }


class SettingsService:
    """Use case: administrators manage the allowed zone and attendance window."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_zone(self) -> Optional[AllowedZone]:
        zone = self._settings.get_zone()
        if zone is None or zone.is_unset:
            return None
        return zone

    def set_zone(self, *, latitude: Any, longitude: Any, radius_meters: Any) -> AllowedZone:
        center = GeoPoint(latitude=require_latitude(latitude), longitude=require_longitude(longitude))
        if center.is_origin:
            raise ValidationError("Zone center (0, 0) is reserved for an unconfigured zone")

        zone = AllowedZone(center=center, radius_meters=require_radius(radius_meters))
        self._settings.set_zone(zone)
        logger.info(
            "Allowed zone updated lat=%.6f lng=%.6f radius=%.1fm",
            center.latitude,
            center.longitude,
            zone.radius_meters,
        )
        return zone

    def is_window_open(self) -> bool:
        return self._settings.get_window()

    def set_window(self, is_open: bool) -> bool:
        self._settings.set_window(bool(is_open))
        logger.info("Attendance window %s", "opened" if is_open else "closed")
        return bool(is_open)

    def status(self) -> AttendanceStatusView:
        zone = self.get_zone()
        return AttendanceStatusView(
            window_open=self._settings.get_window(),
            zone_configured=zone is not None,
            zone=zone,
        )
