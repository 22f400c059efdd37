from __future__ import annotations

from datetime import datetime

import pytest

from src.daycare_tracker.daycare_tracker.core.constants import RECORDS
from src.daycare_tracker.daycare_tracker.core.enums import Provenance
from src.daycare_tracker.daycare_tracker.core.exceptions import AuthenticationError, StoreError, ValidationError
from src.daycare_tracker.daycare_tracker.kids.model import Child

DAY = "2024-03-04"


def _at(hh: int, mm: int) -> datetime:
    return datetime(2024, 3, 4, hh, mm, 0)


@pytest.fixture
def kid(container, uid):
    return container.kid_service.add_child(uid, "Ada Lovelace")


def _flags(r):
    return (r.breakfast, r.am_snack, r.lunch, r.pm_snack)


def test_check_in_creates_record_with_open_interval(container, records_repo, uid, kid):
    rec = container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 10))

    assert rec.key == f"{DAY}_{kid.kid_id}"
    assert rec.in_time == "09:10"
    assert rec.out_time == ""
    assert _flags(rec) == (1, 1, 1, 1)
    assert rec.provenance == Provenance.AUTO
    assert rec.edit_reason == "Check-in button"
    assert rec.edited_by == uid
    assert rec.child_name == "Ada Lovelace"

    stored = records_repo.get(uid, rec.key)
    assert stored == rec


def test_check_out_merges_into_existing_record(container, uid, kid):
    container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 10))
    rec = container.attendance_service.check_out(uid, kid.kid_id, day=DAY, now=_at(12, 0))

    assert (rec.in_time, rec.out_time) == ("09:10", "12:00")
    assert _flags(rec) == (1, 1, 0, 0)
    assert rec.edit_reason == "Check-out button"


def test_check_out_without_check_in_does_not_classify(container, uid, kid):
    rec = container.attendance_service.check_out(uid, kid.kid_id, day=DAY, now=_at(16, 0))

    assert rec.in_time == ""
    assert rec.out_time == "16:00"
    assert _flags(rec) == (0, 0, 0, 0)


def test_clear_resets_times_and_meals(container, uid, kid):
    container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(8, 0))
    container.attendance_service.check_out(uid, kid.kid_id, day=DAY, now=_at(17, 0))

    rec = container.attendance_service.clear(uid, kid.kid_id, day=DAY, now=_at(17, 5))

    assert (rec.in_time, rec.out_time) == ("", "")
    assert _flags(rec) == (0, 0, 0, 0)
    assert rec.provenance == Provenance.MANUAL
    assert rec.edit_reason == "Cleared times"


def test_cleared_record_stays_unclassified_until_new_check_in(container, uid, kid):
    container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(8, 0))
    container.attendance_service.clear(uid, kid.kid_id, day=DAY, now=_at(8, 5))

    rec = container.attendance_service.check_out(uid, kid.kid_id, day=DAY, now=_at(17, 0))
    assert _flags(rec) == (0, 0, 0, 0)

    rec = container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(12, 0))
    assert _flags(rec) == (0, 0, 1, 1)


def test_manual_edit_sets_times_and_reason(container, uid, kid):
    rec = container.attendance_service.manual_edit(
        uid, kid.kid_id, in_time="08:30", out_time="11:30", reason="Forgot to scan", day=DAY, now=_at(18, 0)
    )

    assert _flags(rec) == (1, 1, 0, 0)
    assert rec.provenance == Provenance.MANUAL
    assert rec.edit_reason == "Forgot to scan"


def test_manual_edit_without_reason_keeps_previous_reason(container, uid, kid):
    container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 0))
    rec = container.attendance_service.manual_edit(uid, kid.kid_id, in_time="08:30", reason="  ", day=DAY)

    assert rec.edit_reason == "Check-in button"
    assert rec.provenance == Provenance.MANUAL


@pytest.mark.parametrize(
    "in_time, out_time",
    [
        ("25:00", ""),
        ("09:00", "08:00"),
        ("", "10:00"),
        ("9:00", ""),
        ("09:00", "5pm"),
        ("09:75", ""),
        ("09:00", "10:60"),
        (900, ""),
        ("09:00", 1000),
    ],
)
def test_manual_edit_rejections_write_nothing(container, records_repo, uid, kid, in_time, out_time):
    with pytest.raises(ValidationError):
        container.attendance_service.manual_edit(uid, kid.kid_id, in_time=in_time, out_time=out_time, day=DAY)

    assert records_repo.writes == 0


def test_operations_require_sign_in(container, records_repo, kid):
    with pytest.raises(AuthenticationError):
        container.attendance_service.check_in(None, kid.kid_id, day=DAY)
    with pytest.raises(AuthenticationError):
        container.attendance_service.manual_edit("", kid.kid_id, in_time="09:00", day=DAY)

    assert records_repo.writes == 0


def test_unknown_child_and_bad_date_are_rejected(container, uid, kid):
    with pytest.raises(ValidationError):
        container.attendance_service.check_in(uid, "nope", day=DAY)
    with pytest.raises(ValidationError):
        container.attendance_service.check_in(uid, kid.kid_id, day="04/03/2024")


def test_confirmed_write_publishes_full_snapshot(container, uid, kid):
    snapshots = []
    container.hub.subscribe(uid, RECORDS, snapshots.append)

    container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 0))
    container.attendance_service.check_in(uid, kid.kid_id, day="2024-03-05", now=_at(9, 0))

    assert [len(s) for s in snapshots] == [1, 2]
    assert [r.date for r in snapshots[-1]] == [DAY, "2024-03-05"]


def test_store_failure_propagates_and_publishes_nothing(container, records_repo, uid, kid, monkeypatch):
    def broken_put(*args, **kwargs):
        raise StoreError("Document store unreachable")

    monkeypatch.setattr(records_repo, "put", broken_put)
    snapshots = []
    container.hub.subscribe(uid, RECORDS, snapshots.append)

    with pytest.raises(StoreError):
        container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 0))

    assert snapshots == []
    assert records_repo.docs == {}


def test_child_name_snapshot_is_refreshed_on_update(container, kids_repo, uid, kid):
    container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 0))
    kids_repo.create(uid, Child(kid_id=kid.kid_id, name="Ada King", active=True))

    rec = container.attendance_service.check_out(uid, kid.kid_id, day=DAY, now=_at(10, 0))
    assert rec.child_name == "Ada King"


def test_non_text_reason_is_rejected(container, records_repo, uid, kid):
    with pytest.raises(ValidationError):
        container.attendance_service.manual_edit(uid, kid.kid_id, in_time="09:00", reason=["late"], day=DAY)
    assert records_repo.writes == 0


def test_failed_snapshot_reread_keeps_confirmed_write(container, records_repo, uid, kid, monkeypatch):
    snapshots = []
    container.hub.subscribe(uid, RECORDS, snapshots.append)

    def unreachable(_uid):
        raise StoreError("Document store unreachable")

    monkeypatch.setattr(records_repo, "list_all", unreachable)
    rec = container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 0))

    assert records_repo.get(uid, rec.key) == rec
    assert snapshots == []


def test_get_record(container, uid, kid):
    assert container.attendance_service.get_record(uid, kid.kid_id, DAY) is None
    rec = container.attendance_service.check_in(uid, kid.kid_id, day=DAY, now=_at(9, 0))
    assert container.attendance_service.get_record(uid, kid.kid_id, DAY) == rec
