from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord
from ...rates.model import RateSet


class ReimbursementCalculator(ABC):
    """Calculator interface (Strategy Pattern for reimbursement)."""

    @abstractmethod
    def amount(self, record: AttendanceRecord, rates: RateSet) -> float:
        raise NotImplementedError
