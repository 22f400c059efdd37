from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.clock import clock_of, now_local, parse_iso_date, today_iso
from ..common.validators import optional_text, require_clock
from ..core.app_logger import get_logger
from ..core.constants import REASON_CHECK_IN, REASON_CHECK_OUT, REASON_CLEARED, RECORDS
from ..core.enums import Provenance
from ..core.exceptions import ValidationError
from ..kids.repository import KidRepository
from ..realtime.hub import SnapshotHub
from ..users.service import require_uid
from .model import AttendancePatch, AttendanceRecord, record_key
from .reconciler import RecordReconciler, without_absent
from .repository import AttendanceRepository

logger = get_logger(__name__)


class AttendanceService:
    """Check-in, check-out, clear and manual edits of attendance records.

    Note: every write is read-then-write with no isolation. Two sessions
    editing the same (date, child) record concurrently: last write wins.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        kids: KidRepository,
        hub: Optional[SnapshotHub] = None,
        *,
        reconciler: Optional[RecordReconciler] = None,
    ):
        self._attendance = attendance
        self._kids = kids
        self._hub = hub
        self._reconciler = reconciler or RecordReconciler()

    def check_in(self, uid: Optional[str], kid_id: str, *, day: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        patch = AttendancePatch(
            in_time=clock_of(now),
            provenance=Provenance.AUTO,
            edit_reason=REASON_CHECK_IN,
        )
        return self._save(uid, kid_id, day=day, patch=patch, now=now)

    def check_out(self, uid: Optional[str], kid_id: str, *, day: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        patch = AttendancePatch(
            out_time=clock_of(now),
            provenance=Provenance.AUTO,
            edit_reason=REASON_CHECK_OUT,
        )
        return self._save(uid, kid_id, day=day, patch=patch, now=now)

    def clear(self, uid: Optional[str], kid_id: str, *, day: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        patch = AttendancePatch(
            in_time="",
            out_time="",
            breakfast=0,
            am_snack=0,
            lunch=0,
            pm_snack=0,
            provenance=Provenance.MANUAL,
            edit_reason=REASON_CLEARED,
        )
        return self._save(uid, kid_id, day=day, patch=patch, now=now or now_local())

    def manual_edit(
        self,
        uid: Optional[str],
        kid_id: str,
        *,
        in_time: str,
        out_time: str = "",
        reason: str = "",
        day: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        uid = require_uid(uid)
        in_time = optional_text(in_time, "Check-in time")
        out_time = optional_text(out_time, "Check-out time")

        check_in = require_clock(in_time, "Check-in time")
        if out_time:
            check_out = require_clock(out_time, "Check-out time")
            # Same-day only: an overnight span is not supported.
            if check_out < check_in:
                raise ValidationError("Check-out time cannot be before check-in time")

        reason = optional_text(reason, "Reason")
        patch = AttendancePatch(
            in_time=in_time,
            out_time=out_time,
            provenance=Provenance.MANUAL,
            edit_reason=reason or None,
        )
        return self._save(uid, kid_id, day=day, patch=patch, now=now or now_local())

    def get_record(self, uid: Optional[str], kid_id: str, day: str) -> Optional[AttendanceRecord]:
        uid = require_uid(uid)
        return self._attendance.get(uid, record_key(day, kid_id))

    def _save(self, uid: Optional[str], kid_id: str, *, day: Optional[str], patch: AttendancePatch, now: datetime) -> AttendanceRecord:
        uid = require_uid(uid)
        day = self._require_day(day or today_iso())

        child = self._kids.get(uid, kid_id)
        if not child:
            raise ValidationError("Child does not exist")

        key = record_key(day, child.kid_id)
        existing = self._attendance.get(uid, key)
        record = self._reconciler.reconcile(
            existing=existing,
            day=day,
            child_id=child.kid_id,
            child_name=child.name,
            patch=AttendancePatch(**{**patch.present_fields(), "child_name": child.name, "edited_by": uid}),
            now=now,
        )

        self._attendance.put(uid, key, without_absent(record.to_document()))
        logger.info(
            "saved record %s in=%r out=%r meals=%d/%d/%d/%d (%s)",
            key,
            record.in_time,
            record.out_time,
            record.breakfast,
            record.am_snack,
            record.lunch,
            record.pm_snack,
            record.provenance.value,
        )
        if self._hub:
            self._hub.refresh(uid, RECORDS, lambda: self._attendance.list_all(uid))
        return record

    @staticmethod
    def _require_day(day: str) -> str:
        try:
            parse_iso_date(day)
        except (TypeError, ValueError):
            raise ValidationError(f"Date must be YYYY-MM-DD (got {day!r})")
        return day
