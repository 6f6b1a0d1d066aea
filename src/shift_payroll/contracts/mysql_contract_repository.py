from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional, Sequence

from ..common.intervals import Interval
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, overlap_clause, to_decimal
from .model import Contract
from .repository import ContractRepository, ContractWriteScope

_COLUMNS = "contract_id, worker_id, workplace_id, hourly_rate, starts_at, ends_at"


def _to_contract(row: dict) -> Contract:
    return Contract(
        contract_id=int(row["contract_id"]),
        worker_id=int(row["worker_id"]),
        workplace_id=int(row["workplace_id"]),
        hourly_rate=to_decimal(row["hourly_rate"]),
        active_period=Interval(row["starts_at"], row.get("ends_at")),
    )


class _MySQLContractWriteScope(ContractWriteScope):
    def __init__(self, cur, *, worker_id: int, workplace_id: int):
        self._cur = cur
        self._worker_id = worker_id
        self._workplace_id = workplace_id

    def existing(self) -> Sequence[Contract]:
        self._cur.execute(
            f"""
            SELECT {_COLUMNS}
            FROM contracts
            WHERE worker_id=%s AND workplace_id=%s
            ORDER BY starts_at
            """,
            (self._worker_id, self._workplace_id),
        )
        return [_to_contract(r) for r in fetchall(self._cur)]

    def insert(self, contract: Contract) -> int:
        self._cur.execute(
            """
            INSERT INTO contracts(worker_id, workplace_id, hourly_rate, starts_at, ends_at)
            VALUES(%s,%s,%s,%s,%s)
            """,
            (
                contract.worker_id,
                contract.workplace_id,
                contract.hourly_rate,
                contract.active_period.start,
                contract.active_period.end,
            ),
        )
        return int(self._cur.lastrowid)

    def set_end(self, contract_id: int, ends_at: Optional[datetime]) -> bool:
        self._cur.execute("UPDATE contracts SET ends_at=%s WHERE contract_id=%s", (ends_at, contract_id))
        return self._cur.rowcount > 0


class MySQLContractRepository(ContractRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, contract_id: int) -> Optional[Contract]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM contracts WHERE contract_id=%s", (contract_id,))
            row = fetchone(cur)
            return _to_contract(row) if row else None

    def list_for_worker_and_workplace(
        self,
        *,
        worker_id: int,
        workplace_id: int,
        overlapping: Optional[Interval] = None,
    ) -> Sequence[Contract]:
        clause, params = overlap_clause(overlapping, start_col="starts_at", end_col="ends_at")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM contracts
                WHERE worker_id=%s AND workplace_id=%s{clause}
                ORDER BY starts_at
                """,
                (worker_id, workplace_id, *params),
            )
            return [_to_contract(r) for r in fetchall(cur)]

    def list_for_workplace(self, *, workplace_id: int, overlapping: Optional[Interval] = None) -> Sequence[Contract]:
        clause, params = overlap_clause(overlapping, start_col="starts_at", end_col="ends_at")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM contracts
                WHERE workplace_id=%s{clause}
                ORDER BY starts_at DESC
                """,
                (workplace_id, *params),
            )
            return [_to_contract(r) for r in fetchall(cur)]

    @contextmanager
    def exclusive(self, *, worker_id: int, workplace_id: int) -> Iterator[ContractWriteScope]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Row lock on the worker serializes contract writes for that worker
            # until this transaction commits or rolls back.
            cur.execute("SELECT worker_id FROM workers WHERE worker_id=%s FOR UPDATE", (worker_id,))
            fetchone(cur)
            yield _MySQLContractWriteScope(cur, worker_id=worker_id, workplace_id=workplace_id)
