import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "rollbook"),
}

# Shared bearer token for the JSON API; empty disables the check
API_TOKEN = os.getenv("API_TOKEN", "")

# Where the attendance client talks to
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:5000")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

PAGE_SIZE = int(os.getenv("PAGE_SIZE", "100"))
# 0 = past dates locked, N = last N days editable, negative = no lock
EDIT_WINDOW_DAYS = int(os.getenv("EDIT_WINDOW_DAYS", "0"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
