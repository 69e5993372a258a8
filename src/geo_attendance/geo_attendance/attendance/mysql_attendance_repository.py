from __future__ import annotations

from typing import Any, Dict, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import EvaluationOutcome
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..geo.model import GeoPoint
from ..students.model import StudentIdentity
from .model import CheckInAttempt
from .repository import AttendanceRepository

_SELECT = """
    SELECT attempt_id, prn, display_name, submitted_at, latitude, longitude,
           distance_m, admitted, outcome
    FROM attendance_records
"""


def _to_attempt(r: Dict[str, Any]) -> CheckInAttempt:
    return CheckInAttempt(
        attempt_id=int(r["attempt_id"]),
        identity=StudentIdentity(prn=str(r["prn"]), display_name=r["display_name"]),
        submitted_at=as_utc(r["submitted_at"]),
        location=GeoPoint(latitude=float(r["latitude"]), longitude=float(r["longitude"])),
        distance_meters=float(r["distance_m"]),
        admitted=bool(r["admitted"]),
        outcome=EvaluationOutcome(r["outcome"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, attempt: CheckInAttempt) -> int:
        # DATETIME has no zone; store UTC wall time.
        submitted_at = as_utc(attempt.submitted_at).replace(tzinfo=None)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    prn, display_name, submitted_at, latitude, longitude, distance_m, admitted, outcome
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    attempt.identity.prn,
                    attempt.identity.display_name,
                    submitted_at,
                    attempt.location.latitude,
                    attempt.location.longitude,
                    attempt.distance_meters,
                    1 if attempt.admitted else 0,
                    attempt.outcome.value,
                ),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[CheckInAttempt]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY submitted_at DESC, attempt_id DESC")
            return [_to_attempt(r) for r in fetchall(cur)]

    def get_recent_for_student(self, prn: str, limit: int) -> Sequence[CheckInAttempt]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE prn=%s
                ORDER BY submitted_at DESC, attempt_id DESC
                LIMIT %s
                """,
                (prn, int(limit)),
            )
            return [_to_attempt(r) for r in fetchall(cur)]

    def clear_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records")
            return int(cur.rowcount)
