from __future__ import annotations

from dataclasses import dataclass

from .api.connection import ApiConfig, ApiConnection
from .common.date_formatter import DateFormatter
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS
from .core.enums import Language
from .dashboard.service import DashboardService
from .employees.http_employee_source import HttpEmployeeSource
from .settings.http_settings_source import HttpSettingsSource
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    conn: ApiConnection

    employee_source: HttpEmployeeSource
    settings_source: HttpSettingsSource

    dashboard_service: DashboardService
    settings_service: SettingsService
    default_language: Language


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT_SECONDS)),
    )
    conn = ApiConnection.get_instance(config)
    default_language = Language(str(api_config.get("language", Language.CZ.value)).upper())

    employee_source = HttpEmployeeSource(conn)
    settings_source = HttpSettingsSource(conn)

    dashboard_service = DashboardService(
        employee_source,
        legacy_day_match=bool(api_config.get("legacy_day_match", False)),
        default_language=default_language,
    )
    settings_service = SettingsService(
        settings_source,
        employee_source,
        formatter=DateFormatter(),
        default_language=default_language,
    )

    return Container(
        conn=conn,
        employee_source=employee_source,
        settings_source=settings_source,
        dashboard_service=dashboard_service,
        settings_service=settings_service,
        default_language=default_language,
    )
