"""Tests for the campus clock helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from app.utils import as_campus_time, from_storage, to_storage
from app.utils.clock import parse_timezone


@pytest.mark.parametrize(
    ("name", "expected_offset"),
    [
        ("UTC+05:30", timedelta(hours=5, minutes=30)),
        ("UTC-03:00", timedelta(hours=-3)),
        ("gmt+2", timedelta(hours=2)),
    ],
)
def test_offset_names_are_resolved(name, expected_offset) -> None:
    assert parse_timezone(name).utcoffset(None) == expected_offset


def test_unknown_names_fall_back_to_campus_zone() -> None:
    assert str(parse_timezone("Mars/Olympus_Mons")) == "Asia/Kolkata"


def test_naive_values_are_read_as_campus_time() -> None:
    naive = datetime(2025, 3, 10, 9, 0)

    localized = as_campus_time(naive)

    assert localized.replace(tzinfo=None) == naive
    assert localized.utcoffset() == timedelta(0)


def test_storage_conversion_round_trips_aware_values() -> None:
    aware = datetime(2025, 3, 10, 9, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))

    stored = to_storage(aware)

    assert stored == datetime(2025, 3, 10, 3, 30)
    assert stored.tzinfo is None
    assert from_storage(stored) == aware
    assert to_storage(None) is None
