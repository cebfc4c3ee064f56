import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "rollbook"),
}

API_TOKEN = os.getenv("API_TOKEN", "")

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:5000")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

PAGE_SIZE = int(os.getenv("PAGE_SIZE", "100"))
EDIT_WINDOW_DAYS = int(os.getenv("EDIT_WINDOW_DAYS", "0"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
