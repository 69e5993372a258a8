from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service

    def _unavailable():
        app.logger.exception("Analytics query failed")
        return jsonify({"success": False, "message": "Unable to load analytics. Please try again."}), 503

    @app.route("/api/analytics/summary", methods=["GET"], endpoint="api_analytics_summary")
    def api_analytics_summary():
        try:
            summary = analytics.summary()
        except Exception:
            return _unavailable()
        return jsonify({"success": True, **summary.to_dict()})

    @app.route("/api/analytics/students", methods=["GET"], endpoint="api_analytics_students")
    def api_analytics_students():
        try:
            stats = analytics.student_stats()
        except Exception:
            return _unavailable()
        return jsonify({"success": True, "students": [s.to_dict() for s in stats]})

    @app.route("/api/analytics/daily", methods=["GET"], endpoint="api_analytics_daily")
    def api_analytics_daily():
        try:
            days = analytics.daily_stats()
        except Exception:
            return _unavailable()
        return jsonify({"success": True, "days": [d.to_dict() for d in days]})

    @app.route("/api/analytics/day/<day>", methods=["GET"], endpoint="api_analytics_day")
    def api_analytics_day(day: str):
        try:
            selected = parse_iso_date(day)
        except ValueError:
            return jsonify({"success": False, "message": "Date must be YYYY-MM-DD"}), 400
        try:
            records = analytics.records_for_day(selected)
        except Exception:
            return _unavailable()
        return jsonify({"success": True, "date": day, "records": [r.to_dict() for r in records]})

    @app.route("/api/analytics/students/<prn>", methods=["GET"], endpoint="api_analytics_student")
    def api_analytics_student(prn: str):
        try:
            report = analytics.student_report(prn)
        except Exception:
            return _unavailable()
        if report is None:
            return jsonify({"success": False, "message": "No attendance records for this PRN"}), 404
        return jsonify({"success": True, "report": report.to_dict()})
