from __future__ import annotations

from dataclasses import dataclass

from .base import MealRule


@dataclass(frozen=True)
class WindowRule(MealRule):
    """Meal served over a closed window; any overlap counts (breakfast)."""

    start: int
    end: int

    def covers(self, *, check_in: int, check_out: int) -> bool:
        return check_in <= self.end and check_out >= self.start
