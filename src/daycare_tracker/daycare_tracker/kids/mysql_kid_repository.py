from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, upsert
from .model import Child
from .repository import KidRepository

_COLUMNS = ("uid", "kid_id", "name", "active", "created_at")


def _to_child(r: dict) -> Child:
    return Child(
        kid_id=str(r["kid_id"]),
        name=r["name"],
        active=bool(r["active"]),
        created_at=r.get("created_at") or "",
    )


class MySQLKidRepository(KidRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, uid: str, kid_id: str) -> Optional[Child]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT kid_id, name, active, created_at FROM kids WHERE uid=%s AND kid_id=%s",
                (uid, kid_id),
            )
            r = fetchone(cur)
            return _to_child(r) if r else None

    def create(self, uid: str, child: Child) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            upsert(
                cur,
                table="kids",
                columns=_COLUMNS,
                key_columns=("uid", "kid_id"),
                document={
                    "uid": uid,
                    "kid_id": child.kid_id,
                    "name": child.name,
                    "active": 1 if child.active else 0,
                    "created_at": child.created_at,
                },
            )

    def set_active(self, uid: str, kid_id: str, *, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE kids SET active=%s WHERE uid=%s AND kid_id=%s",
                (1 if active else 0, uid, kid_id),
            )
            return cur.rowcount > 0

    def list_all(self, uid: str) -> Sequence[Child]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT kid_id, name, active, created_at FROM kids WHERE uid=%s ORDER BY name ASC",
                (uid,),
            )
            return [_to_child(r) for r in fetchall(cur)]
