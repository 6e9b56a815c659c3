from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.constants import WIRE_DATE_FORMAT, WIRE_DATETIME_FORMAT


@dataclass(frozen=True)
class DateFormatter:
    """Serializes dates the way the YAManager API expects them."""

    date_format: str = WIRE_DATE_FORMAT
    datetime_format: str = WIRE_DATETIME_FORMAT

    def format_date(self, value: date) -> str:
        return value.strftime(self.date_format)

    def format_datetime(self, value: datetime) -> str:
        return value.strftime(self.datetime_format)
