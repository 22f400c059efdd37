from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Mapping, Optional

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StoreError(f"Document store unreachable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise StoreError(f"Document store rejected the operation: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def reject_absent(document: Mapping[str, Any]) -> None:
    """Mirror of the store contract: absent-value placeholders are refused."""
    absent = sorted(k for k, v in document.items() if v is None)
    if absent:
        raise ValueError(f"Document contains absent values for: {', '.join(absent)}")


def upsert(cur, *, table: str, columns: Iterable[str], key_columns: Iterable[str], document: Mapping[str, Any]) -> None:
    """INSERT ... ON DUPLICATE KEY UPDATE for the columns present in ``document``.

    Columns missing from the document are not written, so an update keeps the
    stored value. Names come from the repository whitelist, never from input.
    """

    reject_absent(document)
    allowed = list(columns)
    cols = [c for c in allowed if c in document]
    keys = set(key_columns)
    missing = keys.difference(cols)
    if missing:
        raise ValueError(f"Missing key columns for {table}: {', '.join(sorted(missing))}")

    placeholders = ",".join(["%s"] * len(cols))
    updates = ", ".join(f"{c}=VALUES({c})" for c in cols if c not in keys)
    sql = f"INSERT INTO {table}({', '.join(cols)}) VALUES({placeholders})"
    if updates:
        sql += f" ON DUPLICATE KEY UPDATE {updates}"
    cur.execute(sql, tuple(document[c] for c in cols))
