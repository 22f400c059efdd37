from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ...common.clock import is_valid_clock_string, parse_clock
from ...core.constants import DEFAULT_MEAL_WINDOWS
from ...core.enums import MealSlot
from .base import MealRule
from .instant_rule import InstantRule
from .window_rule import WindowRule


@dataclass
class MealRuleFactory:
    """Factory Pattern: build one rule per meal slot from configured times."""

    windows: Optional[Mapping[str, str]] = None

    def __post_init__(self):
        merged = dict(DEFAULT_MEAL_WINDOWS)
        merged.update(self.windows or {})
        for name, value in merged.items():
            if not is_valid_clock_string(value):
                raise ValueError(f"MEAL_WINDOWS[{name!r}] is not a valid HH:MM time: {value!r}")
        if parse_clock(merged["breakfast_start"]) > parse_clock(merged["breakfast_end"]):
            raise ValueError("MEAL_WINDOWS breakfast_start is after breakfast_end")
        self.windows = merged

    def build(self) -> dict[MealSlot, MealRule]:
        w = self.windows
        return {
            MealSlot.BREAKFAST: WindowRule(start=parse_clock(w["breakfast_start"]), end=parse_clock(w["breakfast_end"])),
            MealSlot.AM_SNACK: InstantRule(at=parse_clock(w["am_snack"])),
            MealSlot.LUNCH: InstantRule(at=parse_clock(w["lunch"])),
            MealSlot.PM_SNACK: InstantRule(at=parse_clock(w["pm_snack"])),
        }
