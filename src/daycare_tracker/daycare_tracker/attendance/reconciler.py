from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from .meals import MealEligibilityEngine
from .model import AttendancePatch, AttendanceRecord


def default_record(*, day: str, child_id: str, child_name: str) -> AttendanceRecord:
    """Zeroed record used the first time a (date, child) pair is touched."""
    return AttendanceRecord(date=day, child_id=child_id, child_name=child_name)


def merge_patch(base: AttendanceRecord, patch: AttendancePatch) -> AttendanceRecord:
    """Patch fields override base; fields absent from the patch keep base values."""
    return replace(base, **patch.present_fields())


def without_absent(document: dict[str, Any]) -> dict[str, Any]:
    """Drop absent values; the store rejects None placeholders."""
    return {k: v for k, v in document.items() if v is not None}


class RecordReconciler:
    """Compute the next persisted state of an attendance record."""

    def __init__(self, engine: Optional[MealEligibilityEngine] = None):
        self._engine = engine or MealEligibilityEngine()

    def reconcile(
        self,
        *,
        existing: Optional[AttendanceRecord],
        day: str,
        child_id: str,
        child_name: str,
        patch: AttendancePatch,
        now: datetime,
    ) -> AttendanceRecord:
        base = existing or default_record(day=day, child_id=child_id, child_name=child_name)
        merged = self._engine.apply(merge_patch(base, patch))
        return replace(merged, updated_at=now.isoformat(timespec="seconds"))

