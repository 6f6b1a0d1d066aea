from __future__ import annotations

from typing import Collection, Optional, Sequence

from ..common.intervals import Interval
from ..core.enums import ShiftCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = "shift_id, workplace_id, worker_id, category, starts_at, ends_at"


def _to_shift(row: dict) -> Shift:
    worker_id = row.get("worker_id")
    return Shift(
        shift_id=int(row["shift_id"]),
        workplace_id=int(row["workplace_id"]),
        worker_id=int(worker_id) if worker_id is not None else None,
        category=ShiftCategory(row["category"]),
        period=Interval(row["starts_at"], row["ends_at"]),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (shift_id,))
            row = fetchone(cur)
            return _to_shift(row) if row else None

    def list_for_worker(
        self,
        *,
        worker_id: int,
        workplace_id: Optional[int] = None,
        categories: Optional[Collection[ShiftCategory]] = None,
        starting_within: Optional[Interval] = None,
    ) -> Sequence[Shift]:
        sql = f"SELECT {_COLUMNS} FROM shifts WHERE worker_id=%s"
        params: list = [worker_id]
        if workplace_id is not None:
            sql += " AND workplace_id=%s"
            params.append(workplace_id)
        if categories:
            sql += f" AND category IN ({','.join(['%s'] * len(categories))})"
            params.extend(c.value for c in categories)
        if starting_within is not None:
            sql += " AND starts_at >= %s"
            params.append(starting_within.start)
            if starting_within.end is not None:
                sql += " AND starts_at < %s"
                params.append(starting_within.end)
        sql += " ORDER BY starts_at"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_shift(r) for r in fetchall(cur)]

    def insert(self, shift: Shift) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(workplace_id, worker_id, category, starts_at, ends_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (shift.workplace_id, shift.worker_id, shift.category.value, shift.starts_at, shift.ends_at),
            )
            return int(cur.lastrowid)

    def update(self, shift: Shift) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET workplace_id=%s, worker_id=%s, category=%s, starts_at=%s, ends_at=%s
                WHERE shift_id=%s
                """,
                (
                    shift.workplace_id,
                    shift.worker_id,
                    shift.category.value,
                    shift.starts_at,
                    shift.ends_at,
                    shift.shift_id,
                ),
            )
            return cur.rowcount > 0
