from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, upsert
from .model import RateSet
from .repository import RateRepository

_COLUMNS = ("uid", "year_key", "year", "breakfast", "snack", "lunch", "updated_at")


class MySQLRateRepository(RateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def put(self, uid: str, year_key: str, document: Mapping[str, Any]) -> None:
        doc = dict(document)
        doc.update(uid=uid, year_key=year_key)
        with db_cursor(self._conn_factory) as (_, cur):
            upsert(cur, table="reimbursement_rates", columns=_COLUMNS, key_columns=("uid", "year_key"), document=doc)

    def list_all(self, uid: str) -> Sequence[RateSet]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT year, breakfast, snack, lunch, updated_at
                FROM reimbursement_rates
                WHERE uid=%s
                ORDER BY year ASC
                """,
                (uid,),
            )
            return [
                RateSet(
                    year=int(r["year"]),
                    breakfast=float(r["breakfast"] or 0),
                    snack=float(r["snack"] or 0),
                    lunch=float(r["lunch"] or 0),
                    updated_at=r.get("updated_at") or "",
                )
                for r in fetchall(cur)
            ]
