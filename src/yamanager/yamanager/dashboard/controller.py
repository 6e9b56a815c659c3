from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.responses import handle_error
from ..core.enums import Language, ProfileStatus
from ..core.exceptions import TransportError, ValidationError
from ..container import Container

# Refreshes of the same view a request may lose to newer ones before giving up.
REFRESH_ATTEMPTS = 3


def _query():
    status_s = request.args.get("status")
    lang_s = request.args.get("lang")
    today_s = request.args.get("today")
    try:
        return {
            "status": ProfileStatus(status_s.upper()) if status_s else ProfileStatus.AUTHORIZED,
            "language": Language(lang_s.upper()) if lang_s else None,
            "today": parse_iso_date(today_s) if today_s else None,
        }
    except ValueError:
        raise ValidationError("Invalid status, lang or today parameter")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    async def dashboard():
        service = container.dashboard_service
        try:
            query = _query()
            for _ in range(REFRESH_ATTEMPTS):
                grid = await service.refresh(**query)
                if grid is None:
                    # A newer refresh of this same view won; serve its grid.
                    grid = service.grid_for(**query)
                if grid is not None:
                    return jsonify(grid.to_dict())
            raise TransportError("Dashboard refresh was superseded", status=503)
        except Exception as e:
            return handle_error(app, e)
