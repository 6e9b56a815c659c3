from __future__ import annotations

from datetime import date

import pytest

from yamanager.calendar.grid import build_rows
from yamanager.calendar.window import build_window
from yamanager.core.enums import VacationType
from yamanager.core.exceptions import MalformedDateError
from yamanager.employees.model import CalendarEntry, EmployeeBasicInfo


def _employee(employee_id=1, *entries, first="Jan", last="Novak"):
    return EmployeeBasicInfo(
        id=employee_id,
        first_name=first,
        last_name=last,
        photo=f"https://photos.test/{employee_id}.png",
        calendar=tuple(entries),
    )


@pytest.fixture
def window(fixed_now):
    w, _ = build_window(fixed_now)
    return w


def test_empty_calendar_gives_all_none_row(window):
    rows = build_rows([_employee(1)], window)

    assert len(rows) == 1
    assert len(rows[0].days) == 15
    assert all(d.type == VacationType.NONE for d in rows[0].days)
    assert [d.date for d in rows[0].days] == list(window.dates)


def test_single_entry_marks_only_its_day(window):
    emp = _employee(1, CalendarEntry(date=date(2024, 3, 16), type=VacationType.VACATION))

    row = build_rows([emp], window)[0]

    assert row.days[8].type == VacationType.VACATION
    others = [d for i, d in enumerate(row.days) if i != 8]
    assert len(others) == 14
    assert all(d.type == VacationType.NONE for d in others)


@pytest.mark.parametrize("raw", ["2024/03/16", "2024-03-16", "2024-03-16T00:00:00"])
def test_wire_date_strings_are_matched(window, raw):
    emp = _employee(1, CalendarEntry(date=raw, type=VacationType.SICK_DAY))

    row = build_rows([emp], window)[0]

    assert row.days[8].type == VacationType.SICK_DAY


def test_last_entry_for_a_date_wins(window):
    emp = _employee(
        1,
        CalendarEntry(date="2024/03/10", type=VacationType.SICK_DAY),
        CalendarEntry(date="2024/03/10", type=VacationType.VACATION),
    )

    row = build_rows([emp], window)[0]

    assert row.days[2].type == VacationType.VACATION


def test_same_day_of_other_month_is_not_matched(window):
    emp = _employee(1, CalendarEntry(date=date(2024, 4, 16), type=VacationType.VACATION))

    row = build_rows([emp], window)[0]

    assert all(d.type == VacationType.NONE for d in row.days)


def test_legacy_match_uses_day_of_month_only(window):
    emp = _employee(1, CalendarEntry(date=date(2024, 4, 16), type=VacationType.VACATION))

    row = build_rows([emp], window, legacy_day_match=True)[0]

    assert row.days[8].type == VacationType.VACATION


def test_entries_outside_window_are_ignored(window):
    emp = _employee(
        1,
        CalendarEntry(date=date(2024, 3, 7), type=VacationType.VACATION),
        CalendarEntry(date=date(2024, 3, 23), type=VacationType.VACATION),
    )

    row = build_rows([emp], window)[0]

    assert all(d.type == VacationType.NONE for d in row.days)


def test_rows_keep_employee_order_and_names(window):
    employees = [_employee(3, first="Eva", last="Mala"), _employee(1), _employee(2, first="Petr", last="Dvorak")]

    rows = build_rows(employees, window)

    assert [r.id for r in rows] == [3, 1, 2]
    assert rows[0].name == "Eva Mala"
    assert rows[0].photo == "https://photos.test/3.png"


def test_malformed_date_fails_with_employee_id(window):
    emp = _employee(7, CalendarEntry(date="16.03.2024", type=VacationType.VACATION))

    with pytest.raises(MalformedDateError) as exc:
        build_rows([_employee(1), emp], window)

    assert exc.value.employee_id == 7
    assert exc.value.value == "16.03.2024"


def test_build_rows_is_idempotent(window):
    employees = [_employee(1, CalendarEntry(date="2024/03/12", type=VacationType.SICK_DAY))]

    assert build_rows(employees, window) == build_rows(employees, window)
