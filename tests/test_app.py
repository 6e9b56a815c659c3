from __future__ import annotations

import pytest

from config import get_settings_module
from yamanager.main import create_app


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_create_app_registers_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    assert app.config["TESTING"] is True
    for endpoint in ("dashboard", "default_settings", "save_default_settings", "employee_settings", "save_employee_settings"):
        assert endpoint in app.view_functions


def test_explicit_env_wins_over_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    assert get_settings_module("Test") == "config.testing"
    assert get_settings_module("staging") == "config.development"


def test_missing_app_env_means_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"
