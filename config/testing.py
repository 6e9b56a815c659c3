import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://yamanager.test/api"),
    "timeout": 2.0,
    "language": "CZ",
    "legacy_day_match": False,
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
