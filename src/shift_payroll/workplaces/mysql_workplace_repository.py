from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Workplace
from .repository import WorkplaceRepository


class MySQLWorkplaceRepository(WorkplaceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, workplace_id: int) -> Optional[Workplace]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT workplace_id, name FROM workplaces WHERE workplace_id=%s", (workplace_id,))
            row = fetchone(cur)
            if not row:
                return None
            return Workplace(workplace_id=int(row["workplace_id"]), name=row["name"])

    def get_by_name(self, name: str) -> Optional[Workplace]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT workplace_id, name FROM workplaces WHERE name=%s", (name,))
            row = fetchone(cur)
            if not row:
                return None
            return Workplace(workplace_id=int(row["workplace_id"]), name=row["name"])

    def create(self, *, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO workplaces(name) VALUES(%s)", (name,))
            return int(cur.lastrowid)
