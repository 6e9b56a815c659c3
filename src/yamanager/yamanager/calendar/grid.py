from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Sequence

from ..common.datetime_utils import parse_calendar_date
from ..core.enums import VacationType
from ..core.exceptions import MalformedDateError
from ..employees.model import DayInfo, EmployeeBasicInfo, EmployeeRow
from .model import CalendarWindow


def _index_entries(employee: EmployeeBasicInfo, *, legacy_day_match: bool) -> Dict[object, VacationType]:
    """Map each entry's match key to its type; later entries overwrite earlier ones."""
    index: Dict[object, VacationType] = {}
    for entry in employee.calendar or ():
        try:
            day = parse_calendar_date(entry.date)
        except MalformedDateError:
            raise MalformedDateError(entry.date, employee_id=employee.id) from None
        index[day.day if legacy_day_match else day] = entry.type
    return index


def build_days(
    employee: EmployeeBasicInfo,
    window: Iterable[date],
    *,
    legacy_day_match: bool = False,
) -> tuple[DayInfo, ...]:
    """Classify every window day for one employee.

    With ``legacy_day_match`` entries are compared by day of month only, which
    mirrors the old dashboard and will confuse e.g. March 16 with April 16.
    """

    index = _index_entries(employee, legacy_day_match=legacy_day_match)
    days: List[DayInfo] = []
    for d in window:
        key = d.day if legacy_day_match else d
        days.append(DayInfo(date=d, type=index.get(key, VacationType.NONE)))
    return tuple(days)


def build_rows(
    employees: Sequence[EmployeeBasicInfo],
    window: CalendarWindow,
    *,
    legacy_day_match: bool = False,
) -> List[EmployeeRow]:
    """Map employees to dashboard rows, keeping their order."""
    return [
        EmployeeRow(
            id=e.id,
            name=e.full_name,
            photo=e.photo,
            days=build_days(e, window, legacy_day_match=legacy_day_match),
        )
        for e in employees
    ]
