import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8080/api"),
    "timeout": float(os.getenv("API_TIMEOUT_SECONDS", "10")),
    "language": os.getenv("DEFAULT_LANGUAGE", "CZ"),
    # Match calendar entries by day of month only, like the old dashboard
    "legacy_day_match": bool(int(os.getenv("LEGACY_DAY_MATCH", "0"))),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
