from __future__ import annotations

import json
from typing import Any, Optional

from ..core.constants import DEFAULT_WINDOW_OPEN, SETTING_ALLOWED_LOCATION, SETTING_ATTENDANCE_WINDOW
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..geo.model import AllowedZone
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    """Key/value settings stored as JSON in `attendance_settings`."""

    def __init__(self, conn_factory: DatabaseConnection, *, default_window_open: bool = DEFAULT_WINDOW_OPEN):
        self._conn_factory = conn_factory
        self._default_window_open = bool(default_window_open)

    def _get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT setting_value FROM attendance_settings WHERE setting_key=%s",
                (key,),
            )
            row = fetchone(cur)
            if not row or row.get("setting_value") is None:
                return None
            value = row["setting_value"]
            if isinstance(value, (bytes, bytearray)):
                value = value.decode("utf-8")
            return json.loads(value) if isinstance(value, str) else value

    def _put(self, key: str, value: Any) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_settings(setting_key, setting_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value), updated_at=CURRENT_TIMESTAMP
                """,
                (key, json.dumps(value)),
            )

    def get_zone(self) -> Optional[AllowedZone]:
        data = self._get(SETTING_ALLOWED_LOCATION)
        if not data:
            return None
        return AllowedZone.from_dict(data)

    def get_window(self) -> bool:
        data = self._get(SETTING_ATTENDANCE_WINDOW)
        if data is None:
            return self._default_window_open
        return bool(data)

    def set_zone(self, zone: AllowedZone) -> None:
        self._put(SETTING_ALLOWED_LOCATION, zone.to_dict())

    def set_window(self, is_open: bool) -> None:
        self._put(SETTING_ATTENDANCE_WINDOW, bool(is_open))
