from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Language
from .model import DefaultSettings


class SettingsSource(Protocol):
    async def fetch_default_settings(self, language: Optional[Language] = None) -> DefaultSettings:
        raise NotImplementedError

    async def post_default_settings(self, payload: dict, language: Optional[Language] = None) -> None:
        """Store new defaults; ``payload`` is already serialized for the wire."""

        raise NotImplementedError

    async def put_user_settings(self, payload: dict, language: Optional[Language] = None) -> None:
        raise NotImplementedError
