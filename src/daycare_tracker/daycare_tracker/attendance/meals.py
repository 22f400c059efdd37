from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from ..common.clock import is_valid_clock_string, parse_clock
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import MealSlot
from .model import AttendanceRecord
from .rules.base import MealRule
from .rules.factory import MealRuleFactory


class MealEligibilityEngine:
    """Derive the four meal flags of a record from its attendance interval.

    Rules:
    - no valid check-in: the record is returned as is (never auto-classified)
    - no valid check-out: the child counts as present until midnight
    """

    def __init__(self, rules: Optional[Mapping[MealSlot, MealRule]] = None):
        self._rules = dict(rules or MealRuleFactory().build())

    def apply(self, record: AttendanceRecord) -> AttendanceRecord:
        if not is_valid_clock_string(record.in_time):
            return record

        check_in = parse_clock(record.in_time)
        check_out = parse_clock(record.out_time) if is_valid_clock_string(record.out_time) else MINUTES_PER_DAY

        flags = {
            slot.value: 1 if rule.covers(check_in=check_in, check_out=check_out) else 0
            for slot, rule in self._rules.items()
        }
        return replace(record, **flags)
