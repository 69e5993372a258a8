from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.constants import DEFAULT_RADIUS_METERS
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _unavailable(message: str):
        return jsonify({"success": False, "message": message}), 503

    @app.route("/api/attendance/status", methods=["GET"], endpoint="api_attendance_status")
    def api_attendance_status():
        try:
            status = container.settings_service.status()
        except Exception:
            app.logger.exception("Reading attendance status failed")
            return _unavailable("Unable to load attendance status. Please try again.")
        return jsonify({"success": True, **status.to_dict()})

    @app.route("/api/admin/zone", methods=["GET"], endpoint="api_get_zone")
    def api_get_zone():
        try:
            zone = container.settings_service.get_zone()
        except Exception:
            app.logger.exception("Reading allowed location failed")
            return _unavailable("Unable to load the allowed location. Please try again.")
        return jsonify({"success": True, "zone": zone.to_dict() if zone else None})

    @app.route("/api/admin/zone", methods=["PUT"], endpoint="api_set_zone")
    def api_set_zone():
        data = request.get_json(silent=True) or {}
        try:
            zone = container.settings_service.set_zone(
                latitude=data.get("lat"),
                longitude=data.get("lng"),
                radius_meters=data.get("radius", app.config.get("DEFAULT_RADIUS_METERS", DEFAULT_RADIUS_METERS)),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Updating allowed location failed")
            return _unavailable("Failed to update the allowed location. Please try again.")
        return jsonify({"success": True, "message": "Allowed location has been updated", "zone": zone.to_dict()})

    @app.route("/api/admin/window", methods=["PUT"], endpoint="api_set_window")
    def api_set_window():
        data = request.get_json(silent=True) or {}
        is_open = data.get("open")
        if not isinstance(is_open, bool):
            return jsonify({"success": False, "message": "'open' must be true or false"}), 400

        try:
            container.settings_service.set_window(is_open)
        except Exception:
            app.logger.exception("Updating attendance window failed")
            return _unavailable("Failed to update the attendance window. Please try again.")
        message = "Students can now mark attendance" if is_open else "Students can no longer mark attendance"
        return jsonify({"success": True, "window_open": is_open, "message": message})
