from __future__ import annotations

from dataclasses import dataclass

from .base import MealRule


@dataclass(frozen=True)
class InstantRule(MealRule):
    """Meal served at one instant; the child must be present at that minute."""

    at: int

    def covers(self, *, check_in: int, check_out: int) -> bool:
        return check_in <= self.at and check_out >= self.at
