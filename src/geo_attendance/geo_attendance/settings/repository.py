from __future__ import annotations

from typing import Optional, Protocol

from ..geo.model import AllowedZone


class ConfigStore(Protocol):
    """Read side used by the attendance gate; read fresh on every call."""

    def get_zone(self) -> Optional[AllowedZone]:
        raise NotImplementedError

    def get_window(self) -> bool:
        raise NotImplementedError


class SettingsRepository(ConfigStore, Protocol):
    def set_zone(self, zone: AllowedZone) -> None:
        raise NotImplementedError

    def set_window(self, is_open: bool) -> None:
        raise NotImplementedError
