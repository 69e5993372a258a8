import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Radius used when an admin sets a zone without one
DEFAULT_RADIUS_METERS = float(os.getenv("DEFAULT_RADIUS_METERS", "100"))
# Window state before any admin has toggled it
DEFAULT_WINDOW_OPEN = bool(int(os.getenv("DEFAULT_WINDOW_OPEN", "1")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the default PRN cohort on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
