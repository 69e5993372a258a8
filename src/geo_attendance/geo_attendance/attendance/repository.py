from __future__ import annotations

from typing import Protocol, Sequence

from .model import CheckInAttempt


class RecordStore(Protocol):
    """Write side used by the caller of the gate after an evaluation."""

    def save(self, attempt: CheckInAttempt) -> int:
        raise NotImplementedError


class AttendanceRepository(RecordStore, Protocol):
    def list_all(self) -> Sequence[CheckInAttempt]:
        """All attempts, newest first."""

        raise NotImplementedError

    def get_recent_for_student(self, prn: str, limit: int) -> Sequence[CheckInAttempt]:
        raise NotImplementedError

    def clear_all(self) -> int:
        """Admin-only bulk delete. Returns the number of removed attempts."""

        raise NotImplementedError
