from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from yamanager.calendar.window import build_view, build_window
from yamanager.core.constants import DAYS_OF_WEEK


def test_window_is_centered_on_anchor(fixed_now):
    window, _ = build_window(fixed_now)

    assert len(window) == 15
    assert window.anchor == date(2024, 3, 15)
    assert window[7] == date(2024, 3, 15)
    assert window[0] == date(2024, 3, 8)
    assert window[-1] == date(2024, 3, 22)


def test_window_dates_are_consecutive(fixed_now):
    window, _ = build_window(fixed_now)

    for prev, cur in zip(window.dates, window.dates[1:]):
        assert cur - prev == timedelta(days=1)


def test_window_rolls_over_year_end():
    window, _ = build_window(date(2023, 12, 28))

    assert window[0] == date(2023, 12, 21)
    assert window[-1] == date(2024, 1, 4)
    assert date(2024, 1, 1) in window.dates


def test_window_includes_leap_day():
    window, _ = build_window(date(2024, 3, 1))

    assert window[0] == date(2024, 2, 23)
    assert date(2024, 2, 29) in window.dates


def test_labels_for_friday_anchor(fixed_now):
    _, days = build_window(fixed_now)

    assert days.labels == ("pa", "so", "ne", "po", "ut", "st", "ct")


def test_labels_for_sunday_anchor():
    _, days = build_window(date(2024, 3, 17))

    assert days[0] == "ne"
    assert days.offset == 6


@pytest.mark.parametrize("shift", range(7))
def test_labels_are_a_rotation_for_every_weekday(shift):
    anchor = date(2024, 3, 11) + timedelta(days=shift)
    window, days = build_window(anchor)

    assert len(days) == 7
    assert sorted(days.labels) == sorted(DAYS_OF_WEEK)
    assert days.canonical() == DAYS_OF_WEEK
    for column, day in enumerate(window):
        assert days.label_for(column) == DAYS_OF_WEEK[day.weekday()]


def test_view_serializes_fifteen_columns(fixed_now):
    view = build_view(fixed_now)
    data = view.to_dict()

    assert data["anchor"] == "2024-03-15"
    assert len(data["dates"]) == 15
    assert len(data["days"]) == 15
    assert data["days"][7] == "pa"


def test_datetime_anchor_is_truncated_to_day():
    late, _ = build_window(datetime(2024, 3, 15, 23, 59))
    early, _ = build_window(date(2024, 3, 15))

    assert late == early
