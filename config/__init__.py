"""Settings modules for the dashboard, one per deployment environment."""

import os
from typing import Optional

SETTINGS_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}
DEFAULT_SETTINGS_MODULE = SETTINGS_MODULES["development"]


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted path of the settings module for ``env`` (``APP_ENV`` when omitted)."""
    name = (env or os.getenv("APP_ENV") or "").strip().lower()
    return SETTINGS_MODULES.get(name, DEFAULT_SETTINGS_MODULE)
