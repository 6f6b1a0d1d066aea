from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..common.intervals import Interval
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


def to_decimal(value: Any) -> Decimal:
    """DECIMAL columns come back as Decimal, but some drivers hand out str/float."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def overlap_clause(period: Optional[Interval], *, start_col: str, end_col: str) -> tuple[str, tuple]:
    """SQL prefilter for rows whose [start_col, end_col) may overlap `period`.

    Callers still run the result through `intervals.overlaps`; this only keeps
    the result set small.
    """
    if period is None:
        return "", ()
    if period.end is None:
        return f" AND ({end_col} IS NULL OR {end_col} > %s)", (period.start,)
    return f" AND {start_col} < %s AND ({end_col} IS NULL OR {end_col} > %s)", (period.end, period.start)
