from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..attendance.model import CheckInAttempt
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import as_utc
from .model import AttendanceSummary, DailyStats, StudentReport, StudentStats


def _day(attempt: CheckInAttempt) -> date:
    return as_utc(attempt.submitted_at).date()


def _summarize(attempts: Iterable[CheckInAttempt]) -> AttendanceSummary:
    total = successful = 0
    for a in attempts:
        total += 1
        successful += 1 if a.admitted else 0
    return AttendanceSummary(total=total, successful=successful, failed=total - successful)


class AnalyticsService:
    """Aggregate views over recorded attempts. Days are bucketed in UTC."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def _newest_first(self) -> list[CheckInAttempt]:
        attempts = list(self._attendance.list_all())
        attempts.sort(key=lambda a: as_utc(a.submitted_at), reverse=True)
        return attempts

    def summary(self) -> AttendanceSummary:
        return _summarize(self._attendance.list_all())

    def student_stats(self) -> list[StudentStats]:
        by_prn: dict[str, list[CheckInAttempt]] = {}
        for a in self._newest_first():
            by_prn.setdefault(a.identity.prn, []).append(a)

        out: list[StudentStats] = []
        for prn, attempts in by_prn.items():
            s = _summarize(attempts)
            out.append(
                StudentStats(
                    prn=prn,
                    full_name=attempts[0].identity.display_name,
                    total_attempts=s.total,
                    successful_attempts=s.successful,
                    failed_attempts=s.failed,
                    last_attempt=attempts[0].submitted_at,
                )
            )

        out.sort(key=lambda x: x.prn)
        return out

    def daily_stats(self) -> list[DailyStats]:
        by_day: dict[date, list[CheckInAttempt]] = {}
        for a in self._attendance.list_all():
            by_day.setdefault(_day(a), []).append(a)

        out = []
        for day, attempts in by_day.items():
            s = _summarize(attempts)
            out.append(
                DailyStats(
                    day=day,
                    total_attempts=s.total,
                    successful_attempts=s.successful,
                    failed_attempts=s.failed,
                    unique_students=len({a.identity.prn for a in attempts}),
                )
            )

        out.sort(key=lambda x: x.day, reverse=True)
        return out

    def records_for_day(self, day: date) -> list[CheckInAttempt]:
        return [a for a in self._newest_first() if _day(a) == day]

    def student_report(self, prn: str) -> Optional[StudentReport]:
        records = [a for a in self._newest_first() if a.identity.prn == prn]
        if not records:
            return None

        by_month: dict[str, list[CheckInAttempt]] = {}
        for a in records:
            by_month.setdefault(as_utc(a.submitted_at).strftime("%Y-%m"), []).append(a)

        s = _summarize(records)
        return StudentReport(
            prn=prn,
            full_name=records[0].identity.display_name,
            total_attempts=s.total,
            successful_attempts=s.successful,
            failed_attempts=s.failed,
            first_attempt=records[-1].submitted_at,
            last_attempt=records[0].submitted_at,
            monthly={month: _summarize(items) for month, items in sorted(by_month.items())},
            records=records,
        )
