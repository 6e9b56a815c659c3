import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8080/api"),
    "timeout": float(os.getenv("API_TIMEOUT_SECONDS", "10")),
    "language": os.getenv("DEFAULT_LANGUAGE", "CZ"),
    "legacy_day_match": bool(int(os.getenv("LEGACY_DAY_MATCH", "0"))),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
