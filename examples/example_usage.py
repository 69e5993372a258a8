"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the check-in rules live in the services.
"""

import importlib

from config import get_settings_module

from src.geo_attendance.geo_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    print(container.settings_service.status().to_dict())
    decision = container.attendance_service.preview(
        prn="24020542001",
        display_name="Student 24020542001",
        latitude=19.0761,
        longitude=72.8778,
    )
    print(decision.to_dict())


if __name__ == "__main__":
    main()
