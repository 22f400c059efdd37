from __future__ import annotations

from typing import Any, Mapping, Optional

import pytest
from flask import Flask
from werkzeug.security import generate_password_hash

from src.daycare_tracker.daycare_tracker.attendance.model import AttendanceRecord
from src.daycare_tracker.daycare_tracker.container import assemble
from src.daycare_tracker.daycare_tracker.database.mysql_base import reject_absent
from src.daycare_tracker.daycare_tracker.kids.model import Child
from src.daycare_tracker.daycare_tracker.main import register_all
from src.daycare_tracker.daycare_tracker.rates.model import RateSet
from src.daycare_tracker.daycare_tracker.users.model import User

UID = "uid-1"
PASSWORD = "secret123"


class InMemoryUsers:
    def __init__(self, users: list[User]):
        self._by_uid = {u.uid: u for u in users}

    def get_by_uid(self, uid: str) -> Optional[User]:
        return self._by_uid.get(uid)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_uid.values() if u.username == username), None)


class InMemoryKids:
    def __init__(self):
        self._docs: dict[tuple[str, str], Child] = {}

    def get(self, uid: str, kid_id: str) -> Optional[Child]:
        return self._docs.get((uid, kid_id))

    def create(self, uid: str, child: Child) -> None:
        self._docs[(uid, child.kid_id)] = child

    def set_active(self, uid: str, kid_id: str, *, active: bool) -> bool:
        child = self._docs.get((uid, kid_id))
        if not child:
            return False
        self._docs[(uid, kid_id)] = Child(kid_id=child.kid_id, name=child.name, active=active, created_at=child.created_at)
        return True

    def list_all(self, uid: str):
        return sorted((c for (u, _), c in self._docs.items() if u == uid), key=lambda c: c.name)


class InMemoryRecords:
    """Document-store double: merge writes, refuses None placeholders."""

    def __init__(self):
        self.docs: dict[tuple[str, str], dict[str, Any]] = {}
        self.writes = 0

    def get(self, uid: str, key: str) -> Optional[AttendanceRecord]:
        doc = self.docs.get((uid, key))
        return AttendanceRecord.from_document(doc) if doc else None

    def put(self, uid: str, key: str, document: Mapping[str, Any]) -> None:
        reject_absent(document)
        self.docs.setdefault((uid, key), {}).update(document)
        self.writes += 1

    def list_all(self, uid: str):
        docs = [d for (u, _), d in self.docs.items() if u == uid]
        return [AttendanceRecord.from_document(d) for d in sorted(docs, key=lambda d: d["date"])]

    def list_for_date(self, uid: str, day: str):
        return [r for r in self.list_all(uid) if r.date == day]


class InMemoryRates:
    def __init__(self):
        self.docs: dict[tuple[str, str], dict[str, Any]] = {}

    def put(self, uid: str, year_key: str, document: Mapping[str, Any]) -> None:
        reject_absent(document)
        self.docs.setdefault((uid, year_key), {}).update(document)

    def list_all(self, uid: str):
        docs = sorted((d for (u, _), d in self.docs.items() if u == uid), key=lambda d: d["year"])
        return [RateSet(**d) for d in docs]


@pytest.fixture
def uid() -> str:
    return UID


@pytest.fixture
def users_repo():
    return InMemoryUsers(
        [
            User(uid=UID, username="staff", display_name="Staff", password_hash=generate_password_hash(PASSWORD)),
            User(uid="uid-2", username="gone", display_name="Gone", password_hash=generate_password_hash(PASSWORD), is_active=False),
        ]
    )


@pytest.fixture
def kids_repo():
    return InMemoryKids()


@pytest.fixture
def records_repo():
    return InMemoryRecords()


@pytest.fixture
def rates_repo():
    return InMemoryRates()


@pytest.fixture
def container(users_repo, kids_repo, records_repo, rates_repo, tmp_path):
    c = assemble(
        users_repo=users_repo,
        kids_repo=kids_repo,
        attendance_repo=records_repo,
        rates_repo=rates_repo,
        export_dir=tmp_path / "exports",
    )
    yield c
    c.close()


@pytest.fixture
def app(container):
    app = Flask(__name__)
    app.secret_key = "test-secret"
    app.config["TESTING"] = True
    register_all(app, container)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in_client(client, uid):
    with client.session_transaction() as s:
        s["uid"] = uid
        s["name"] = "Staff"
    return client
