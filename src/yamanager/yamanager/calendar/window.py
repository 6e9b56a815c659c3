from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Tuple

from ..common.datetime_utils import to_date
from ..core.constants import DAYS_AFTER_ANCHOR, DAYS_BEFORE_ANCHOR, DAYS_OF_WEEK
from .model import CalendarView, CalendarWindow, DayLabelRotation


def _weekday_index(day: date) -> int:
    """Weekday counted from Sunday = 0."""
    return (day.weekday() + 1) % 7


def build_window(anchor: date | datetime) -> Tuple[CalendarWindow, DayLabelRotation]:
    """Build the dashboard date window and the day labels that go above it.

    The window spans ``DAYS_BEFORE_ANCHOR`` days before the anchor up to
    ``DAYS_AFTER_ANCHOR`` days after it. Both values come from one call so the
    labels can never be computed for a different anchor than the dates.
    """

    day = to_date(anchor)
    dates = tuple(day + timedelta(days=offset) for offset in range(-DAYS_BEFORE_ANCHOR, DAYS_AFTER_ANCHOR + 1))

    n = len(DAYS_OF_WEEK)
    first = _weekday_index(day) - (DAYS_BEFORE_ANCHOR + 1)
    labels = tuple(DAYS_OF_WEEK[((i % n) + n) % n] for i in range(first, first + n))

    return CalendarWindow(dates=dates), DayLabelRotation(labels=labels, offset=((first % n) + n) % n)


def build_view(anchor: date | datetime) -> CalendarView:
    window, days = build_window(anchor)
    return CalendarView(window=window, days=days)
