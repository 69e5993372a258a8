from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_prn
from ..core.exceptions import ValidationError
from .model import StudentIdentity
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage the PRN registry (admin)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def register(self, *, prn: str, display_name: str) -> StudentIdentity:
        prn = require_prn(prn)
        display_name = require_non_empty(display_name, "Full name")

        if self._students.exists(prn):
            raise ValidationError("PRN is already registered")

        self._students.create(prn=prn, display_name=display_name)
        logger.info("Registered student prn=%s", prn)
        return StudentIdentity(prn=prn, display_name=display_name)

    def get(self, prn: str) -> Optional[StudentIdentity]:
        return self._students.exists(require_prn(prn))

    def list_all(self) -> Sequence[StudentIdentity]:
        return self._students.list_all()
