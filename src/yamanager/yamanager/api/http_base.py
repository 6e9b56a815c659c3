from __future__ import annotations

import asyncio
from typing import Any, Dict, Mapping, Optional

import requests

from ..common.logging import get_logger
from ..core.exceptions import TransportError
from .connection import ApiConnection

logger = get_logger(__name__)


def create_params(**values: Any) -> Dict[str, str]:
    """Build query parameters, dropping the unset ones.

    Enum members are sent by value.
    """

    params: Dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        params[key] = str(getattr(value, "value", value))
    return params


def _error_message(response: requests.Response) -> str:
    # The server answers errors with {"error": "<code>", "message": "<key>"}.
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or f"HTTP {response.status_code}"


def _send(
    conn: ApiConnection,
    method: str,
    path: str,
    params: Optional[Mapping[str, Any]],
    json: Any,
) -> Any:
    try:
        response = conn.request(method, path, params=params, json=json)
    except requests.RequestException as e:
        raise TransportError(f"{method} {path} failed: {e}") from e

    if response.status_code >= 400:
        raise TransportError(_error_message(response), status=response.status_code)

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


async def call_api(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    json: Any = None,
) -> Any:
    """Run one API round-trip without blocking the event loop.

    Returns the decoded JSON body (``None`` for empty bodies). Failures raise
    TransportError and are never retried here.
    """

    try:
        return await asyncio.to_thread(_send, conn, method, path, params, json)
    except TransportError as e:
        logger.warning(
            "API call failed",
            extra={"stage": "transport", "method": method, "path": path, "status": e.status},
        )
        raise
