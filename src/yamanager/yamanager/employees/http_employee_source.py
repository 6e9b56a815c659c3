from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from ..api.connection import ApiConnection
from ..api.http_base import call_api, create_params
from ..common.datetime_utils import parse_wire_datetime
from ..core.enums import Language, ProfileStatus, UserRole, VacationType
from ..core.exceptions import DataIntegrityError
from .model import CalendarEntry, EmployeeBasicInfo, UserProfile
from .repository import EmployeeSource


def _optional_enum(enum_cls, value):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise DataIntegrityError(f"Unknown {enum_cls.__name__} value: {value!r}")


def to_calendar_entry(raw: dict) -> CalendarEntry:
    if not isinstance(raw, dict):
        raise DataIntegrityError(f"Malformed calendar entry: {raw!r}")
    try:
        kind = VacationType(raw["type"])
    except (KeyError, TypeError, ValueError):
        raise DataIntegrityError(f"Unknown calendar entry type: {raw.get('type')!r}")
    # Date stays raw; the grid mapper decides whether it parses.
    return CalendarEntry(date=raw.get("date"), type=kind)


def _record_id(raw: Any) -> int:
    if not isinstance(raw, dict):
        raise DataIntegrityError(f"Malformed record: {raw!r}")
    try:
        return int(raw["id"])
    except (KeyError, TypeError, ValueError):
        raise DataIntegrityError(f"Record without a valid id: {raw.get('id')!r}")


def to_employee(raw: dict) -> EmployeeBasicInfo:
    employee_id = _record_id(raw)
    calendar = raw.get("calendar") or ()
    if not isinstance(calendar, (list, tuple)):
        raise DataIntegrityError(f"Calendar of employee {employee_id} is not a list")
    return EmployeeBasicInfo(
        id=employee_id,
        first_name=raw.get("firstName") or "",
        last_name=raw.get("lastName") or "",
        photo=raw.get("photo"),
        calendar=tuple(to_calendar_entry(c) for c in calendar),
    )


def to_profile(raw: dict) -> UserProfile:
    notification = raw.get("notification")
    return UserProfile(
        id=_record_id(raw),
        first_name=raw.get("firstName") or "",
        last_name=raw.get("lastName") or "",
        photo=raw.get("photo"),
        role=_optional_enum(UserRole, raw.get("role")),
        sick_day_count=raw.get("sickDayCount"),
        vacation_count=raw.get("vacationCount"),
        status=_optional_enum(ProfileStatus, raw.get("status")),
        # Older servers send the notification as a string.
        notification=parse_wire_datetime(notification) if notification else None,
    )


class HttpEmployeeSource(EmployeeSource):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    async def fetch_employees(
        self,
        status: Optional[ProfileStatus] = None,
        language: Optional[Language] = None,
    ) -> Sequence[EmployeeBasicInfo]:
        body: Any = await call_api(self._conn, "GET", "/users", params=create_params(lang=language, status=status))
        if body is not None and not isinstance(body, list):
            raise DataIntegrityError("Employee list is not a JSON array")
        return [to_employee(r) for r in body or []]

    async def fetch_profile(
        self,
        employee_id: Union[int, str],
        language: Optional[Language] = None,
    ) -> UserProfile:
        body = await call_api(self._conn, "GET", f"/user/{employee_id}/profile", params=create_params(lang=language))
        if not body:
            raise DataIntegrityError(f"Empty profile for employee {employee_id}")
        return to_profile(body)
