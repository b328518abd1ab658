"""Unit tests for fulfillment date parsing helpers."""

from __future__ import annotations

from datetime import datetime

from fulfillment_runtime.domain.common.dates import date_sort_key, latest_date, parse_date


def test_parse_netsuite_and_iso_dates():
    assert parse_date("3/1/2025") == datetime(2025, 3, 1)
    assert parse_date("3/1/2025 2:05 pm") == datetime(2025, 3, 1, 14, 5)
    assert parse_date("2025-03-01T10:00:00Z") == datetime(2025, 3, 1, 10, 0)


def test_unreadable_dates_sort_first():
    assert parse_date("") is None
    assert parse_date("not a date") is None
    assert date_sort_key(None) == datetime.min
    assert sorted(["3/2/2025", "", "3/1/2025"], key=date_sort_key) == ["", "3/1/2025", "3/2/2025"]


def test_latest_date_compares_chronologically():
    # String comparison would pick "9/1/2024"
    assert latest_date("9/1/2024", "10/1/2024") == "10/1/2024"
    assert latest_date("", None) == ""
    assert latest_date("", "3/1/2025") == "3/1/2025"


def test_offset_timestamps_are_read_as_utc():
    assert parse_date("2025-03-01T10:00:00+02:00") == datetime(2025, 3, 1, 8, 0)
    assert parse_date("2025-03-01T01:00:00-05:00") == datetime(2025, 3, 1, 6, 0)
    assert parse_date("2025-03-01T10:00:00") == datetime(2025, 3, 1, 10, 0)
    # 09:00Z is after 10:00+02:00 (08:00Z)
    assert latest_date("2025-03-01T10:00:00+02:00", "2025-03-01T09:00:00Z") == "2025-03-01T09:00:00Z"
