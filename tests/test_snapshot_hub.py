from src.daycare_tracker.daycare_tracker.core.constants import KIDS, RECORDS
from src.daycare_tracker.daycare_tracker.core.exceptions import StoreError
from src.daycare_tracker.daycare_tracker.realtime.hub import SnapshotHub
from src.daycare_tracker.daycare_tracker.realtime.state import LocalState


def test_publish_reaches_only_matching_subscribers():
    hub = SnapshotHub()
    mine, other = [], []
    hub.subscribe("u1", RECORDS, mine.append)
    hub.subscribe("u2", RECORDS, other.append)

    hub.publish("u1", RECORDS, ["a", "b"])

    assert mine == [("a", "b")]
    assert other == []


def test_unsubscribe_stops_delivery():
    hub = SnapshotHub()
    got = []
    unsubscribe = hub.subscribe("u1", KIDS, got.append)
    unsubscribe()
    unsubscribe()

    hub.publish("u1", KIDS, ["x"])
    assert got == []


def test_broken_listener_does_not_block_others():
    hub = SnapshotHub()
    got = []

    def broken(_snapshot):
        raise RuntimeError("boom")

    hub.subscribe("u1", KIDS, broken)
    hub.subscribe("u1", KIDS, got.append)
    hub.publish("u1", KIDS, ["x"])

    assert got == [("x",)]


def test_local_state_replaces_whole_collections():
    hub = SnapshotHub()
    state = LocalState(uid="u1").attach(hub)

    hub.publish("u1", RECORDS, ["r1", "r2"])
    hub.publish("u1", RECORDS, ["r3"])
    assert state.records == ("r3",)

    state.detach()
    hub.publish("u1", RECORDS, [])
    assert state.records == ("r3",)


def test_local_state_follows_service_writes(container, uid):
    state = LocalState(uid=uid).attach(container.hub)

    kid = container.kid_service.add_child(uid, "Bo")
    container.attendance_service.check_in(uid, kid.kid_id, day="2024-03-04")
    container.rate_service.save_rates(uid, year=2024, breakfast=2, snack=1, lunch=3)

    assert [k.name for k in state.kids] == ["Bo"]
    assert [r.child_id for r in state.records] == [kid.kid_id]
    assert [r.year for r in state.rates] == [2024]


def test_refresh_publishes_what_was_read():
    hub = SnapshotHub()
    got = []
    hub.subscribe("u1", KIDS, got.append)

    assert hub.refresh("u1", KIDS, lambda: ["a"]) is True
    assert got == [("a",)]


def test_refresh_swallows_store_failure_and_keeps_last_snapshot():
    hub = SnapshotHub()
    state = LocalState(uid="u1").attach(hub)
    hub.publish("u1", RECORDS, ["r1"])

    def unreachable():
        raise StoreError("Document store unreachable")

    assert hub.refresh("u1", RECORDS, unreachable) is False
    assert state.records == ("r1",)
