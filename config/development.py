import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Browser convention: UTC = local + offset (UTC+02:00 -> -120).
DEFAULT_TIMEZONE_OFFSET_MINUTES = int(os.getenv("DEFAULT_TIMEZONE_OFFSET_MINUTES", "-120"))
GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "15"))
MIDNIGHT_WINDOW_END = os.getenv("MIDNIGHT_WINDOW_END", "06:00")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
