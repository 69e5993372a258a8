from __future__ import annotations

from typing import Optional

import pytest
from flask import Flask

from src.geo_attendance.geo_attendance.analytics.service import AnalyticsService
from src.geo_attendance.geo_attendance.attendance.gate import AttendanceGate
from src.geo_attendance.geo_attendance.attendance.service import AttendanceService
from src.geo_attendance.geo_attendance.container import Container
from src.geo_attendance.geo_attendance.geo.model import AllowedZone
from src.geo_attendance.geo_attendance.main import register_all
from src.geo_attendance.geo_attendance.settings.service import SettingsService
from src.geo_attendance.geo_attendance.students.model import StudentIdentity
from src.geo_attendance.geo_attendance.students.service import StudentService


class InMemoryStudents:
    def __init__(self, *prns: str):
        self.by_prn = {p: StudentIdentity(prn=p, display_name=f"Student {p}") for p in prns}
        self.fail = False

    def exists(self, prn: str) -> Optional[StudentIdentity]:
        if self.fail:
            raise ConnectionError("registry down")
        return self.by_prn.get(prn)

    def create(self, *, prn: str, display_name: str) -> None:
        if self.fail:
            raise ConnectionError("registry down")
        self.by_prn[prn] = StudentIdentity(prn=prn, display_name=display_name)

    def list_all(self):
        if self.fail:
            raise ConnectionError("registry down")
        return list(self.by_prn.values())


class InMemorySettings:
    def __init__(self):
        self.zone: Optional[AllowedZone] = None
        self.window = True
        self.fail = False

    def get_zone(self):
        if self.fail:
            raise TimeoutError("settings store timed out")
        return self.zone

    def get_window(self):
        if self.fail:
            raise TimeoutError("settings store timed out")
        return self.window

    def set_zone(self, zone):
        if self.fail:
            raise TimeoutError("settings store timed out")
        self.zone = zone

    def set_window(self, is_open):
        if self.fail:
            raise TimeoutError("settings store timed out")
        self.window = is_open


class InMemoryAttendance:
    def __init__(self):
        self.saved = []
        self.fail = False

    def save(self, attempt):
        self.saved.append(attempt)
        return len(self.saved)

    def list_all(self):
        if self.fail:
            raise ConnectionError("database unavailable")
        return list(reversed(self.saved))

    def get_recent_for_student(self, prn, limit):
        if self.fail:
            raise ConnectionError("database unavailable")
        return [a for a in reversed(self.saved) if a.identity.prn == prn][:limit]

    def clear_all(self):
        if self.fail:
            raise ConnectionError("database unavailable")
        n = len(self.saved)
        self.saved.clear()
        return n


@pytest.fixture
def repos():
    return InMemoryStudents("24020542001", "24020542002"), InMemorySettings(), InMemoryAttendance()


@pytest.fixture
def client(repos):
    students, settings, attendance = repos
    gate = AttendanceGate(students, settings)
    container = Container(
        conn=None,
        students_repo=students,
        settings_repo=settings,
        attendance_repo=attendance,
        gate=gate,
        attendance_service=AttendanceService(gate, attendance),
        settings_service=SettingsService(settings),
        student_service=StudentService(students),
        analytics_service=AnalyticsService(attendance),
    )
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_all(app, container)
    return app.test_client()


def _check_in(client, prn="24020542001", lat=19.0761, lng=72.8778, full_name=""):
    return client.post("/api/attendance", json={"prn": prn, "full_name": full_name, "lat": lat, "lng": lng})


def test_full_check_in_flow(client, repos):
    status = client.get("/api/attendance/status").get_json()
    assert status["zone_configured"] is False

    resp = _check_in(client)
    assert resp.get_json()["outcome"] == "ZONE_NOT_CONFIGURED"

    resp = client.put("/api/admin/zone", json={"lat": 19.0760, "lng": 72.8777, "radius": 100})
    assert resp.status_code == 200

    resp = _check_in(client, full_name="Someone Else")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["outcome"] == "ADMITTED"
    assert body["distance_meters"] == pytest.approx(15.30, abs=0.05)
    assert "15m" in body["message"]

    records = client.get("/api/attendance/records").get_json()["records"]
    assert len(records) == 1
    assert records[0]["prn"] == "24020542001"
    assert records[0]["full_name"] == "Student 24020542001"


def test_zone_without_radius_uses_default(client, repos):
    resp = client.put("/api/admin/zone", json={"lat": 18.5204, "lng": 73.8567})

    assert resp.status_code == 200
    assert resp.get_json()["zone"]["radius"] == 100.0


def test_closed_window_is_a_normal_response(client, repos):
    client.put("/api/admin/zone", json={"lat": 19.0760, "lng": 72.8777, "radius": 100})
    assert client.put("/api/admin/window", json={"open": False}).status_code == 200

    body = _check_in(client).get_json()

    assert body["success"] is False
    assert body["outcome"] == "WINDOW_CLOSED"
    assert body["distance_meters"] is None
    assert repos[2].saved == []


def test_unknown_prn(client):
    body = _check_in(client, prn="24020542999").get_json()

    assert body["outcome"] == "IDENTITY_UNKNOWN"
    assert body["distance_meters"] is None


@pytest.mark.parametrize("prn,full_name", [("STU-42", "Alice Rao"), ("24020542999", ""), ("24020542999", None)])
def test_unregistered_prn_is_reported_not_rejected(client, repos, prn, full_name):
    client.put("/api/admin/zone", json={"lat": 19.0760, "lng": 72.8777, "radius": 100})

    resp = _check_in(client, prn=prn, full_name=full_name)

    assert resp.status_code == 200
    assert resp.get_json()["outcome"] == "IDENTITY_UNKNOWN"
    assert repos[2].saved == []


@pytest.mark.parametrize(
    "payload",
    [None, {"prn": "24020542001", "full_name": "Alice", "lat": "x", "lng": 1}, {"full_name": "Alice", "lat": 1, "lng": 1}],
)
def test_bad_request_bodies(client, payload):
    resp = client.post("/api/attendance", json=payload) if payload is not None else client.post("/api/attendance", data="nope")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_collaborator_outage_returns_503_and_records_nothing(client, repos):
    students, _, attendance = repos
    students.fail = True

    resp = _check_in(client)

    assert resp.status_code == 503
    assert attendance.saved == []


def test_window_requires_boolean(client):
    assert client.put("/api/admin/window", json={"open": "yes"}).status_code == 400


def test_invalid_zone_is_rejected(client):
    resp = client.put("/api/admin/zone", json={"lat": 0, "lng": 0, "radius": 100})

    assert resp.status_code == 400


def test_register_student_then_check_in(client):
    client.put("/api/admin/zone", json={"lat": 19.0760, "lng": 72.8777, "radius": 100})
    resp = client.post("/api/admin/students", json={"prn": "24020542100", "full_name": "Dev Patel"})
    assert resp.status_code == 201

    body = _check_in(client, prn="24020542100", lat=19.0860).get_json()
    assert body["outcome"] == "OUTSIDE_RADIUS"

    history = client.get("/api/students/24020542100/history").get_json()["records"]
    assert [r["admitted"] for r in history] == [False]
    assert history[0]["full_name"] == "Dev Patel"


def test_analytics_endpoints(client):
    client.put("/api/admin/zone", json={"lat": 19.0760, "lng": 72.8777, "radius": 100})
    _check_in(client)
    _check_in(client, lat=19.0900)
    _check_in(client, prn="24020542002")

    assert client.get("/api/analytics/summary").get_json()["total"] == 3
    students = client.get("/api/analytics/students").get_json()["students"]
    assert {s["prn"]: s["successful_attempts"] for s in students} == {"24020542001": 1, "24020542002": 1}
    assert len(client.get("/api/analytics/daily").get_json()["days"]) == 1
    assert client.get("/api/analytics/day/2026-13-40").status_code == 400
    assert client.get("/api/analytics/students/24020542999").status_code == 404

    report = client.get("/api/analytics/students/24020542001").get_json()["report"]
    assert report["total_attempts"] == 2

    assert client.delete("/api/attendance/records").get_json()["removed"] == 3
    assert client.get("/api/analytics/summary").get_json()["total"] == 0


@pytest.mark.parametrize("limit", ["0", "-1"])
def test_history_rejects_non_positive_limit(client, limit):
    resp = client.get(f"/api/students/24020542001/history?limit={limit}")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/attendance/records"),
        ("delete", "/api/attendance/records"),
        ("get", "/api/students/24020542001/history"),
    ],
)
def test_attendance_store_outage_returns_503(client, repos, method, path):
    repos[2].fail = True

    resp = getattr(client, method)(path)

    assert resp.status_code == 503
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize(
    "method,path,payload",
    [
        ("get", "/api/attendance/status", None),
        ("get", "/api/admin/zone", None),
        ("put", "/api/admin/zone", {"lat": 19.0760, "lng": 72.8777, "radius": 100}),
        ("put", "/api/admin/window", {"open": False}),
    ],
)
def test_settings_store_outage_returns_503(client, repos, method, path, payload):
    repos[1].fail = True

    resp = getattr(client, method)(path, json=payload)

    assert resp.status_code == 503
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize(
    "method,path,payload",
    [
        ("get", "/api/admin/students", None),
        ("post", "/api/admin/students", {"prn": "24020542100", "full_name": "Dev Patel"}),
    ],
)
def test_student_registry_outage_returns_503(client, repos, method, path, payload):
    repos[0].fail = True

    resp = getattr(client, method)(path, json=payload)

    assert resp.status_code == 503
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize(
    "path",
    [
        "/api/analytics/summary",
        "/api/analytics/students",
        "/api/analytics/daily",
        "/api/analytics/day/2026-10-19",
        "/api/analytics/students/24020542001",
    ],
)
def test_analytics_outage_returns_503(client, repos, path):
    repos[2].fail = True

    resp = client.get(path)

    assert resp.status_code == 503
    assert resp.get_json()["success"] is False
