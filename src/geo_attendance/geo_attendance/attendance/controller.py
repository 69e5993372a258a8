from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import EvaluationOutcome
from ..core.exceptions import ValidationError
from ..container import Container
from .model import GateDecision

_MESSAGES = {
    EvaluationOutcome.IDENTITY_UNKNOWN: "PRN is not registered",
    EvaluationOutcome.WINDOW_CLOSED: "The attendance window is currently closed",
    EvaluationOutcome.ZONE_NOT_CONFIGURED: "No allowed location has been set yet",
    EvaluationOutcome.INVALID_LOCATION: "Submitted location is not a valid GPS position",
}


def describe(decision: GateDecision) -> str:
    if decision.outcome == EvaluationOutcome.ADMITTED:
        return f"Attendance marked. You are {decision.distance_meters:.0f}m from the allowed zone."
    if decision.outcome == EvaluationOutcome.OUTSIDE_RADIUS:
        return f"You are not inside the allowed zone. You are {decision.distance_meters:.0f}m away."
    return _MESSAGES[decision.outcome]


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _submission(data: dict) -> dict:
        return {
            "prn": str(data.get("prn") or ""),
            "display_name": str(data.get("full_name") or ""),
            "latitude": data.get("lat"),
            "longitude": data.get("lng"),
        }

    def _decision_response(decision: GateDecision):
        body = {"success": decision.admitted, "message": describe(decision)}
        body.update(decision.to_dict())
        return jsonify(body), 200

    def _unavailable(message: str):
        # Retryable: nothing was recorded for this attempt.
        return jsonify({"success": False, "message": message}), 503

    @app.route("/api/attendance", methods=["POST"], endpoint="api_check_in")
    def api_check_in():
        try:
            decision = container.attendance_service.check_in(**_submission(_payload()))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Check-in failed")
            return _unavailable("Failed to mark attendance. Please try again.")
        return _decision_response(decision)

    @app.route("/api/attendance/preview", methods=["POST"], endpoint="api_check_in_preview")
    def api_check_in_preview():
        try:
            decision = container.attendance_service.preview(**_submission(_payload()))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Location preview failed")
            return _unavailable("Unable to check your location. Please try again.")
        return _decision_response(decision)

    @app.route("/api/attendance/records", methods=["GET"], endpoint="api_records")
    def api_records():
        try:
            records = container.attendance_service.list_records()
        except Exception:
            app.logger.exception("Listing attendance records failed")
            return _unavailable("Unable to load attendance records. Please try again.")
        return jsonify({"success": True, "records": [r.to_dict() for r in records]})

    @app.route("/api/attendance/records", methods=["DELETE"], endpoint="api_clear_records")
    def api_clear_records():
        try:
            removed = container.attendance_service.clear_records()
        except Exception:
            app.logger.exception("Clearing attendance records failed")
            return _unavailable("Unable to clear attendance records. Please try again.")
        return jsonify({"success": True, "removed": removed})

    @app.route("/api/students/<prn>/history", methods=["GET"], endpoint="api_student_history")
    def api_student_history(prn: str):
        try:
            limit = request.args.get("limit", DEFAULT_HISTORY_LIMIT, type=int)
            records = container.attendance_service.history(prn, limit=limit)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Loading history for %s failed", prn)
            return _unavailable("Unable to load attendance history. Please try again.")
        return jsonify({"success": True, "records": [r.to_dict() for r in records]})
