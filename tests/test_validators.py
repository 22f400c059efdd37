import pytest

from src.daycare_tracker.daycare_tracker.common.validators import (
    optional_text,
    require_clock,
    require_non_empty,
    require_rate,
)
from src.daycare_tracker.daycare_tracker.core.exceptions import ValidationError


def test_optional_text():
    assert optional_text(None, "Reason") == ""
    assert optional_text("  late bus ", "Reason") == "late bus"
    with pytest.raises(ValidationError):
        optional_text(3, "Reason")


@pytest.mark.parametrize("value", [None, "", "   ", 42, ["Ada"]])
def test_require_non_empty_rejects(value):
    with pytest.raises(ValidationError):
        require_non_empty(value, "Child name")


def test_require_clock_accepts_real_times():
    assert require_clock("00:00", "t") == 0
    assert require_clock(" 23:59 ", "t") == 1439


@pytest.mark.parametrize("value", ["09:75", "10:60", "24:00", "9:00", 900, None])
def test_require_clock_rejects(value):
    with pytest.raises(ValidationError):
        require_clock(value, "Check-in time")


@pytest.mark.parametrize("value, expected", [("2.35", 2.35), (0.1, 0.1), (3, 3.0), ("0", 0.0)])
def test_require_rate_accepts_cents(value, expected):
    assert require_rate(value, "Lunch rate") == expected


@pytest.mark.parametrize("value", [0.333, "0.125", 1e-05, 1e300, "inf", -0.5])
def test_require_rate_rejects(value):
    with pytest.raises(ValidationError):
        require_rate(value, "Lunch rate")
