from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Worker
from .repository import WorkerRepository

_COLUMNS = "worker_id, first_name, last_name, email, password_hash"


def _to_worker(row: dict) -> Worker:
    return Worker(
        worker_id=int(row["worker_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row.get("email"),
        password_hash=row["password_hash"],
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (worker_id,))
            row = fetchone(cur)
            return _to_worker(row) if row else None

    def get_by_email(self, email: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE LOWER(email)=%s", (email.lower(),))
            row = fetchone(cur)
            return _to_worker(row) if row else None

    def get_many(self, worker_ids: Sequence[int]) -> Sequence[Worker]:
        if not worker_ids:
            return []
        placeholders = ",".join(["%s"] * len(worker_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM workers WHERE worker_id IN ({placeholders})",
                tuple(int(w) for w in worker_ids),
            )
            return [_to_worker(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: Optional[str],
        password_hash: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workers(first_name, last_name, email, password_hash)
                VALUES(%s,%s,%s,%s)
                """,
                (first_name, last_name, email, password_hash),
            )
            return int(cur.lastrowid)
