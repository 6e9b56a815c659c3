from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS


class ApiConnection:
    """Singleton-like factory for requests against the YAManager REST API.

    Note: Every call is a short-lived blocking request; callers move it off the
    event loop (see ``http_base.call_api``).
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> requests.Response:
        return requests.request(
            method,
            self.url(path),
            params=params,
            json=json,
            timeout=self._config.timeout,
        )
