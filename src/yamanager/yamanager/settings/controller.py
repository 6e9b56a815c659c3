from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import handle_error
from ..core.enums import Language
from ..core.exceptions import ValidationError
from ..container import Container
from .model import DialogResult


def _language() -> Language | None:
    lang_s = request.args.get("lang")
    if not lang_s:
        return None
    try:
        return Language(lang_s.upper())
    except ValueError:
        raise ValidationError(f"Unknown language: {lang_s}")


def _dialog_result(body: dict, **overrides) -> DialogResult:
    # Missing "confirmed" means the client submitted the form.
    values = {k: v for k, v in body.items() if k != "confirmed"}
    values.update(overrides)
    return DialogResult(is_confirmed=bool(body.get("confirmed", True)), values=values)


def register(app: Flask, container: Container) -> None:
    service = container.settings_service

    @app.route("/api/settings/default", methods=["GET"], endpoint="default_settings")
    async def default_settings():
        try:
            form = await service.open_default_settings(_language())
            return jsonify(form.to_dict())
        except Exception as e:
            return handle_error(app, e)

    @app.route("/api/settings/default", methods=["POST"], endpoint="save_default_settings")
    async def save_default_settings():
        try:
            body = request.get_json(silent=True) or {}
            saved = await service.confirm_default_settings(_dialog_result(body), _language())
            return jsonify({"saved": saved})
        except Exception as e:
            return handle_error(app, e)

    @app.route("/api/employees/<int:employee_id>/settings", methods=["GET"], endpoint="employee_settings")
    async def employee_settings(employee_id: int):
        try:
            form = await service.open_user_settings(employee_id, _language())
            return jsonify(form.to_dict())
        except Exception as e:
            return handle_error(app, e)

    @app.route("/api/employees/<int:employee_id>/settings", methods=["PUT"], endpoint="save_employee_settings")
    async def save_employee_settings(employee_id: int):
        try:
            body = request.get_json(silent=True) or {}
            saved = await service.confirm_user_settings(_dialog_result(body, id=employee_id), _language())
            return jsonify({"saved": saved})
        except Exception as e:
            return handle_error(app, e)
