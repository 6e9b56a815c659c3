from __future__ import annotations

from typing import Optional

from ..api.connection import ApiConnection
from ..api.http_base import call_api, create_params
from ..common.datetime_utils import parse_wire_datetime
from ..core.enums import Language
from .model import DefaultSettings
from .repository import SettingsSource


def to_default_settings(raw: Optional[dict]) -> DefaultSettings:
    raw = raw or {}
    notification = raw.get("notification")
    return DefaultSettings(
        sick_day_count=raw.get("sickdayCount"),
        notification=parse_wire_datetime(notification) if notification else None,
    )


class HttpSettingsSource(SettingsSource):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    async def fetch_default_settings(self, language: Optional[Language] = None) -> DefaultSettings:
        body = await call_api(self._conn, "GET", "/settings", params=create_params(lang=language))
        return to_default_settings(body)

    async def post_default_settings(self, payload: dict, language: Optional[Language] = None) -> None:
        await call_api(self._conn, "POST", "/settings", params=create_params(lang=language), json=payload)

    async def put_user_settings(self, payload: dict, language: Optional[Language] = None) -> None:
        await call_api(self._conn, "PUT", "/user/settings", params=create_params(lang=language), json=payload)
