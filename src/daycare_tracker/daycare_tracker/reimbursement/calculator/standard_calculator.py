from __future__ import annotations

from .base import ReimbursementCalculator
from ...attendance.model import AttendanceRecord
from ...rates.model import RateSet


class StandardReimbursementCalculator(ReimbursementCalculator):
    """Standard rule: breakfast*b + (am+pm snack)*s + lunch*l, unrounded."""

    def amount(self, record: AttendanceRecord, rates: RateSet) -> float:
        return (
            record.breakfast * rates.breakfast
            + (record.am_snack + record.pm_snack) * rates.snack
            + record.lunch * rates.lunch
        )
