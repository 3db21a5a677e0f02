from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
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


def normalize_mysql_date(value: Any) -> str:
    """Render a DATE column as ``YYYY-MM-DD``.

    mysql-connector returns DATE as datetime.date, but pure-python mode and
    some drivers hand back bytes or strings.
    """

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")[:10]
    if isinstance(value, str):
        return value[:10]

    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")


def normalize_clock(value: Any) -> str:
    """Time columns are CHAR(5) ``HH:MM`` text; strip padding and decode bytes."""
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    return str(value or "").strip()
