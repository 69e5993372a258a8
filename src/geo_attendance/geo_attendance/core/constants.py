"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6371000.0

DEFAULT_RADIUS_METERS = 100.0
DEFAULT_WINDOW_OPEN = True
DEFAULT_HISTORY_LIMIT = 30
MAX_HISTORY_LIMIT = 200

# Registration numbers handed out for the default cohort: 24020542001..24020542182
DEFAULT_PRN_PREFIX = "24020542"
DEFAULT_PRN_COUNT = 182

SETTING_ALLOWED_LOCATION = "allowed_location"
SETTING_ATTENDANCE_WINDOW = "attendance_window"
