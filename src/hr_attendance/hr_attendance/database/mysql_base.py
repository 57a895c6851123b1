from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from ..common.time_utils import normalize_time_to_hms
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, roll back on any error."""
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
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values (time, timedelta or 'HH:MM[:SS]' string) to datetime.time."""

    if value is None:
        return None
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        total = int(value.total_seconds()) % 86400
        return time(hour=total // 3600, minute=(total % 3600) // 60, second=total % 60)
    if isinstance(value, str):
        h, m, s = (int(p) for p in normalize_time_to_hms(value).split(":"))
        return time(hour=h % 24, minute=m, second=s)
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
