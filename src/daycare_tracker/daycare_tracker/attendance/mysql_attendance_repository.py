from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, upsert
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = (
    "uid",
    "record_id",
    "date",
    "child_id",
    "child_name",
    "in_time",
    "out_time",
    "breakfast",
    "am_snack",
    "lunch",
    "pm_snack",
    "provenance",
    "edited_by",
    "edit_reason",
    "updated_at",
)

_SELECT = """
    SELECT date, child_id, child_name, in_time, out_time,
           breakfast, am_snack, lunch, pm_snack,
           provenance, edited_by, edit_reason, updated_at
    FROM records
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, uid: str, key: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE uid=%s AND record_id=%s", (uid, key))
            r = fetchone(cur)
            return AttendanceRecord.from_document(r) if r else None

    def put(self, uid: str, key: str, document: Mapping[str, Any]) -> None:
        doc = dict(document)
        doc.update(uid=uid, record_id=key)
        with db_cursor(self._conn_factory) as (_, cur):
            upsert(cur, table="records", columns=_COLUMNS, key_columns=("uid", "record_id"), document=doc)

    def list_all(self, uid: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE uid=%s ORDER BY date ASC, child_name ASC", (uid,))
            return [AttendanceRecord.from_document(r) for r in fetchall(cur)]

    def list_for_date(self, uid: str, day: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE uid=%s AND date=%s ORDER BY child_name ASC", (uid, day))
            return [AttendanceRecord.from_document(r) for r in fetchall(cur)]
