from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StudentIdentity
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, prn: str) -> Optional[StudentIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT prn, display_name, created_at
                FROM students
                WHERE prn=%s
                """,
                (prn,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return StudentIdentity(
                prn=str(row["prn"]),
                display_name=row["display_name"],
                created_at=row.get("created_at"),
            )

    def create(self, *, prn: str, display_name: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(prn, display_name) VALUES(%s,%s)",
                (prn, display_name),
            )

    def list_all(self) -> Sequence[StudentIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT prn, display_name, created_at
                FROM students
                ORDER BY prn
                """
            )
            rows = fetchall(cur)
            return [
                StudentIdentity(
                    prn=str(r["prn"]),
                    display_name=r["display_name"],
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]
