from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from ..core.enums import Provenance


def record_key(day: str, child_id: str) -> str:
    """Document id of an attendance record: ``<date>_<childId>``."""
    return f"{day}_{child_id}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one child's attendance on one day.

    Empty strings mean "not set": no check-in / not checked out yet.
    The four meal flags are 0/1 and always derived from the times.
    """

    date: str
    child_id: str
    child_name: str
    in_time: str = ""
    out_time: str = ""
    breakfast: int = 0
    am_snack: int = 0
    lunch: int = 0
    pm_snack: int = 0
    provenance: Provenance = Provenance.AUTO
    edited_by: str = ""
    edit_reason: str = ""
    updated_at: str = ""

    @property
    def key(self) -> str:
        return record_key(self.date, self.child_id)

    @property
    def snacks(self) -> int:
        return self.am_snack + self.pm_snack

    def to_document(self) -> dict[str, Any]:
        doc = asdict(self)
        doc["provenance"] = self.provenance.value
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "AttendanceRecord":
        known = {f.name for f in fields(cls)}
        data = {k: v for k, v in doc.items() if k in known and v is not None}
        data["provenance"] = Provenance(data.get("provenance") or Provenance.AUTO.value)
        for flag in ("breakfast", "am_snack", "lunch", "pm_snack"):
            data[flag] = int(data.get(flag) or 0)
        return cls(**data)


@dataclass(frozen=True)
class AttendancePatch:
    """Partial update of an attendance record.

    ``None`` means "not part of this patch": the base value is kept and the
    field is left out of the written document.
    """

    child_name: Optional[str] = None
    in_time: Optional[str] = None
    out_time: Optional[str] = None
    breakfast: Optional[int] = None
    am_snack: Optional[int] = None
    lunch: Optional[int] = None
    pm_snack: Optional[int] = None
    provenance: Optional[Provenance] = None
    edited_by: Optional[str] = None
    edit_reason: Optional[str] = None

    def present_fields(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

