from __future__ import annotations

import json
import logging
from datetime import date, datetime

import pytest

from yamanager.common.date_formatter import DateFormatter
from yamanager.common.datetime_utils import parse_calendar_date, parse_wire_datetime
from yamanager.common.logging import JSONFormatter
from yamanager.common.validators import require_fields
from yamanager.core.exceptions import MalformedDateError, MissingFieldError


def test_parse_calendar_date_accepts_server_and_iso_forms():
    assert parse_calendar_date("2024/02/29") == date(2024, 2, 29)
    assert parse_calendar_date("2024-02-29") == date(2024, 2, 29)
    assert parse_calendar_date(datetime(2024, 2, 29, 13, 0)) == date(2024, 2, 29)


@pytest.mark.parametrize("raw", ["2023/02/29", "", "yesterday", None, 20240229])
def test_parse_calendar_date_rejects_garbage(raw):
    with pytest.raises(MalformedDateError):
        parse_calendar_date(raw)


def test_parse_wire_datetime_forms():
    assert parse_wire_datetime("2024/12/01 08:05:00") == datetime(2024, 12, 1, 8, 5)
    assert parse_wire_datetime("2024/12/01 08:05") == datetime(2024, 12, 1, 8, 5)
    assert parse_wire_datetime("2024-12-01T08:05:00") == datetime(2024, 12, 1, 8, 5)


def test_date_formatter_uses_server_format():
    formatter = DateFormatter()

    assert formatter.format_date(date(2024, 3, 5)) == "2024/03/05"
    assert formatter.format_datetime(datetime(2024, 3, 5, 7, 4, 9)) == "2024/03/05 07:04:09"


def test_require_fields_treats_none_as_missing():
    require_fields({"a": 0, "b": ""}, ["a", "b"])

    with pytest.raises(MissingFieldError) as exc:
        require_fields({"a": None}, ["a", "b"])

    assert exc.value.fields == ("a", "b")


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("yamanager.test", logging.INFO, __file__, 1, "Refresh %s", ("done",), None)
    record.generation = 3

    data = json.loads(JSONFormatter().format(record))

    assert data["message"] == "Refresh done"
    assert data["level"] == "INFO"
    assert data["generation"] == 3
