from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.geo_attendance.geo_attendance.analytics.service import AnalyticsService
from src.geo_attendance.geo_attendance.attendance.model import CheckInAttempt
from src.geo_attendance.geo_attendance.core.enums import EvaluationOutcome
from src.geo_attendance.geo_attendance.geo.model import GeoPoint
from src.geo_attendance.geo_attendance.students.model import StudentIdentity


class FakeAttendanceRepo:
    def __init__(self, attempts):
        self._attempts = attempts

    def list_all(self):
        return list(self._attempts)


def _attempt(prn, name, when, admitted):
    return CheckInAttempt(
        identity=StudentIdentity(prn=prn, display_name=name),
        submitted_at=when,
        location=GeoPoint(19.0761, 72.8778),
        distance_meters=15.3 if admitted else 850.0,
        admitted=admitted,
        outcome=EvaluationOutcome.ADMITTED if admitted else EvaluationOutcome.OUTSIDE_RADIUS,
    )


@pytest.fixture
def analytics():
    utc = timezone.utc
    attempts = [
        _attempt("24020542001", "Alice Rao", datetime(2026, 1, 30, 9, 0, tzinfo=utc), True),
        _attempt("24020542001", "Alice Rao", datetime(2026, 2, 2, 8, 55, tzinfo=utc), False),
        _attempt("24020542001", "Alice Rao", datetime(2026, 2, 2, 9, 1, tzinfo=utc), True),
        _attempt("24020542002", "Bilal Khan", datetime(2026, 2, 2, 9, 3, tzinfo=utc), True),
        _attempt("24020542003", "Chen Wei", datetime(2026, 2, 1, 9, 10, tzinfo=utc), False),
    ]
    return AnalyticsService(FakeAttendanceRepo(attempts))


def test_summary_counts(analytics):
    assert analytics.summary().to_dict() == {"total": 5, "successful": 3, "failed": 2}


def test_student_stats(analytics):
    stats = {s.prn: s for s in analytics.student_stats()}

    alice = stats["24020542001"]
    assert (alice.total_attempts, alice.successful_attempts, alice.failed_attempts) == (3, 2, 1)
    assert alice.attendance_rate == pytest.approx(66.6667, abs=1e-3)
    assert alice.last_attempt == datetime(2026, 2, 2, 9, 1, tzinfo=timezone.utc)
    assert stats["24020542003"].attendance_rate == 0.0
    assert list(stats) == ["24020542001", "24020542002", "24020542003"]


def test_daily_stats_newest_first_with_unique_students(analytics):
    days = analytics.daily_stats()

    assert [d.day for d in days] == [date(2026, 2, 2), date(2026, 2, 1), date(2026, 1, 30)]
    feb2 = days[0]
    assert (feb2.total_attempts, feb2.successful_attempts, feb2.failed_attempts) == (3, 2, 1)
    assert feb2.unique_students == 2
    assert feb2.to_dict()["date"] == "2026-02-02"


def test_records_for_day(analytics):
    records = analytics.records_for_day(date(2026, 2, 2))

    assert [r.identity.prn for r in records] == ["24020542002", "24020542001", "24020542001"]
    assert analytics.records_for_day(date(2025, 12, 25)) == []


def test_student_report_monthly_breakdown(analytics):
    report = analytics.student_report("24020542001")

    assert report is not None
    assert report.full_name == "Alice Rao"
    assert report.first_attempt == datetime(2026, 1, 30, 9, 0, tzinfo=timezone.utc)
    assert report.last_attempt == datetime(2026, 2, 2, 9, 1, tzinfo=timezone.utc)
    assert {k: v.to_dict() for k, v in report.monthly.items()} == {
        "2026-01": {"total": 1, "successful": 1, "failed": 0},
        "2026-02": {"total": 2, "successful": 1, "failed": 1},
    }
    assert report.to_dict()["attendance_rate"] == 66.67


def test_student_report_for_unknown_prn(analytics):
    assert analytics.student_report("24020542999") is None
