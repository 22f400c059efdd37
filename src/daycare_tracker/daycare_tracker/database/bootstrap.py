from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.app_logger import get_logger
from .connection import DatabaseConnection

logger = get_logger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_create_db_and_use(_strip_comments(Path(schema_path).read_text(encoding="utf-8")))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied from %s", schema_path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in cur.fetchall()]
    finally:
        conn.close()


def ensure_demo_user(conn_factory: DatabaseConnection, *, username: str = "demo", password: str = "demo123") -> str:
    """Create (or reset the password of) a demo account; returns its uid."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(password)
        cur.execute("SELECT uid FROM users WHERE username=%s", (username,))
        existing = cur.fetchone()
        if existing:
            uid = str(existing["uid"])
            cur.execute(
                "UPDATE users SET password_hash=%s, is_active=1 WHERE uid=%s",
                (password_hash, uid),
            )
        else:
            uid = uuid.uuid4().hex
            cur.execute(
                """
                INSERT INTO users (uid, username, display_name, password_hash)
                VALUES (%s, %s, %s, %s)
                """,
                (uid, username, "Demo Staff", password_hash),
            )
        conn.commit()
        return uid
    finally:
        conn.close()
