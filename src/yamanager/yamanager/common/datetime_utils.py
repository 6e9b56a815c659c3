from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import WIRE_DATE_FORMAT, WIRE_DATETIME_FORMAT
from ..core.exceptions import MalformedDateError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_calendar_date(value: DateLike) -> date:
    """Parse a calendar entry date as sent by the API.

    Accepts ``date``/``datetime`` objects, the server's ``YYYY/MM/DD`` form and
    ISO 8601 (``YYYY-MM-DD`` optionally followed by a time part).
    """

    if isinstance(value, (date, datetime)):
        return to_date(value)
    if not isinstance(value, str):
        raise MalformedDateError(value)

    text = value.strip()
    try:
        return datetime.strptime(text, WIRE_DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise MalformedDateError(value) from None


def parse_wire_datetime(value: Union[datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise MalformedDateError(value)

    text = value.strip()
    for fmt in (WIRE_DATETIME_FORMAT, "%Y/%m/%d %H:%M", WIRE_DATE_FORMAT):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise MalformedDateError(value) from None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
