from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RateSet:
    """Per-meal reimbursement amounts effective for one calendar year.

    ``snack`` is paid for the morning and the afternoon snack alike.
    """

    year: int
    breakfast: float = 0.0
    snack: float = 0.0
    lunch: float = 0.0
    updated_at: str = ""

    @classmethod
    def zero(cls, year: int) -> "RateSet":
        return cls(year=int(year))
