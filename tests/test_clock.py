from datetime import datetime

import pytest

from src.daycare_tracker.daycare_tracker.common.clock import (
    clock_of,
    format_clock,
    is_valid_clock_string,
    month_key,
    parse_clock,
    year_of,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00", 0),
        ("09:30", 570),
        ("23:59", 1439),
        ("25:00", 1500),
        ("", None),
        (None, None),
        ("9:30", None),
        ("09:30:00", None),
        ("09-30", None),
        ("ab:cd", None),
    ],
)
def test_parse_clock(value, expected):
    assert parse_clock(value) == expected


def test_valid_clock_string_checks_range():
    assert is_valid_clock_string("09:00")
    assert is_valid_clock_string("23:59")
    assert not is_valid_clock_string("24:00")
    assert not is_valid_clock_string("25:00")
    assert not is_valid_clock_string("")


def test_valid_clock_string_only_bounds_total_minutes():
    # 9*60 + 75 = 615, inside the day.
    assert is_valid_clock_string("09:75")


def test_format_and_date_keys():
    assert format_clock(570) == "09:30"
    assert month_key("2024-03-15") == "2024-03"
    assert year_of("2024-03-15") == 2024


def test_clock_of_drops_seconds():
    assert clock_of(datetime(2024, 3, 4, 7, 5, 59)) == "07:05"
