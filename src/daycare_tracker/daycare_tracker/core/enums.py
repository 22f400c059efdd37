from __future__ import annotations

from enum import Enum


class Provenance(str, Enum):
    """How the times of an attendance record were set."""

    AUTO = "auto"
    MANUAL = "manual"


class MealSlot(str, Enum):
    """The four reimbursable meal slots of a day."""

    BREAKFAST = "breakfast"
    AM_SNACK = "am_snack"
    LUNCH = "lunch"
    PM_SNACK = "pm_snack"
