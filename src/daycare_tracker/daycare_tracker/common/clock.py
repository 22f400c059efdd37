"""Wall-clock helpers.

Times are local "HH:MM" strings compared as minute-of-day integers (0..1439).
No timezone handling on purpose: what the staff's wall clock shows is stored.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import MINUTES_PER_DAY

_CLOCK_RE = re.compile(r"[0-9]{2}:[0-9]{2}")


def parse_clock(value: Optional[str]) -> Optional[int]:
    """Parse "HH:MM" into minutes of day, None for empty/malformed input.

    Only the shape is checked here; "25:00" parses to 1500. Use
    is_valid_clock_string() to also check the range.
    """
    if not value or not _CLOCK_RE.fullmatch(value):
        return None
    return int(value[:2]) * 60 + int(value[3:5])


def is_valid_clock_string(value: Optional[str]) -> bool:
    minutes = parse_clock(value)
    return minutes is not None and 0 <= minutes < MINUTES_PER_DAY


def format_clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def clock_of(moment: datetime) -> str:
    """Wall-clock "HH:MM" of a datetime; seconds are dropped."""
    return format_clock(moment.hour * 60 + moment.minute)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_iso() -> str:
    return now_local().date().strftime("%Y-%m-%d")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def month_key(day: str) -> str:
    return day[:7]


def year_of(day: str) -> int:
    return int(day[:4])
