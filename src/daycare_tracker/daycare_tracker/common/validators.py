from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import RATE_DECIMALS
from ..core.exceptions import ValidationError
from .clock import is_valid_clock_string, parse_clock


def optional_text(value: Any, field_name: str) -> str:
    """Stripped string, "" for a missing value; anything but text is rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()


def require_non_empty(value: Any, field_name: str) -> str:
    text = optional_text(value, field_name)
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def require_clock(value: Any, field_name: str) -> int:
    text = optional_text(value, field_name)
    if not text:
        raise ValidationError(f"{field_name} is required")
    # Stored times must be real wall-clock strings, so 09:75 is refused here.
    if not is_valid_clock_string(text) or int(text[3:5]) >= 60:
        raise ValidationError(f"{field_name} must be HH:MM (got {text!r})")
    return parse_clock(text)


def require_rate(value: Any, field_name: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    # NaN compares false with everything, so check it explicitly.
    if amount != amount or amount < 0 or amount == float("inf"):
        raise ValidationError(f"{field_name} must be a non-negative amount")

    # The store keeps cents; a finer amount would not survive the round trip.
    exact = Decimal(repr(amount))
    try:
        cents = exact.quantize(Decimal(1).scaleb(-RATE_DECIMALS))
    except InvalidOperation:
        raise ValidationError(f"{field_name} is too large")
    if exact != cents:
        raise ValidationError(f"{field_name} can have at most {RATE_DECIMALS} decimals")
    return amount


def require_year(value: Any, *, min_year: int, max_year: int) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Year must be a whole number")
    if not min_year <= year <= max_year:
        raise ValidationError(f"Year must be between {min_year} and {max_year}")
    return year
