from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from ..attendance.model import CheckInAttempt


def _rate(successful: int, total: int) -> float:
    return (successful / total) * 100 if total else 0.0


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    successful: int
    failed: int

    def to_dict(self) -> dict:
        return {"total": self.total, "successful": self.successful, "failed": self.failed}


@dataclass(frozen=True)
class StudentStats:
    prn: str
    full_name: str
    total_attempts: int
    successful_attempts: int
    failed_attempts: int
    last_attempt: datetime

    @property
    def attendance_rate(self) -> float:
        return _rate(self.successful_attempts, self.total_attempts)

    def to_dict(self) -> dict:
        return {
            "prn": self.prn,
            "full_name": self.full_name,
            "total_attempts": self.total_attempts,
            "successful_attempts": self.successful_attempts,
            "failed_attempts": self.failed_attempts,
            "last_attempt": self.last_attempt.isoformat(),
            "attendance_rate": round(self.attendance_rate, 2),
        }


@dataclass(frozen=True)
class DailyStats:
    day: date
    total_attempts: int
    successful_attempts: int
    failed_attempts: int
    unique_students: int

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "total_attempts": self.total_attempts,
            "successful_attempts": self.successful_attempts,
            "failed_attempts": self.failed_attempts,
            "unique_students": self.unique_students,
        }


@dataclass(frozen=True)
class StudentReport:
    """Read-model for the per-student drill-down."""

    prn: str
    full_name: str
    total_attempts: int
    successful_attempts: int
    failed_attempts: int
    first_attempt: datetime
    last_attempt: datetime
    monthly: dict[str, AttendanceSummary] = field(default_factory=dict)
    records: list[CheckInAttempt] = field(default_factory=list)

    @property
    def attendance_rate(self) -> float:
        return _rate(self.successful_attempts, self.total_attempts)

    def to_dict(self) -> dict:
        return {
            "prn": self.prn,
            "full_name": self.full_name,
            "total_attempts": self.total_attempts,
            "successful_attempts": self.successful_attempts,
            "failed_attempts": self.failed_attempts,
            "attendance_rate": round(self.attendance_rate, 2),
            "first_attempt": self.first_attempt.isoformat(),
            "last_attempt": self.last_attempt.isoformat(),
            "monthly": {k: v.to_dict() for k, v in self.monthly.items()},
            "records": [r.to_dict() for r in self.records],
        }
