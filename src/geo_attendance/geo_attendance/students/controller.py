from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _unavailable(message: str):
        return jsonify({"success": False, "message": message}), 503

    @app.route("/api/admin/students", methods=["GET"], endpoint="api_list_students")
    def api_list_students():
        try:
            students = container.student_service.list_all()
        except Exception:
            app.logger.exception("Listing students failed")
            return _unavailable("Unable to load students. Please try again.")
        return jsonify({"success": True, "students": [s.to_dict() for s in students]})

    @app.route("/api/admin/students", methods=["POST"], endpoint="api_register_student")
    def api_register_student():
        data = request.get_json(silent=True) or {}
        try:
            student = container.student_service.register(
                prn=str(data.get("prn") or ""),
                display_name=str(data.get("full_name") or ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Registering student failed")
            return _unavailable("Failed to register the student. Please try again.")
        return jsonify({"success": True, "student": student.to_dict()}), 201
