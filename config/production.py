import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_TIMEZONE_OFFSET_MINUTES = int(os.getenv("DEFAULT_TIMEZONE_OFFSET_MINUTES", "-120"))
GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "15"))
MIDNIGHT_WINDOW_END = os.getenv("MIDNIGHT_WINDOW_END", "06:00")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
