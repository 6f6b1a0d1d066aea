from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest

from shift_payroll.common.intervals import Interval, includes, overlaps
from shift_payroll.contracts.model import Contract
from shift_payroll.core.enums import ShiftCategory
from shift_payroll.shifts.model import Shift
from shift_payroll.workers.model import Worker
from shift_payroll.workplaces.model import Workplace


def dt(value: str) -> datetime:
    return datetime.fromisoformat(value)


class InMemoryWorkers:
    def __init__(self):
        self._by_id: dict[int, Worker] = {}
        self._id = 0

    def add(self, first_name: str = "John", last_name: str = "Doe", email: Optional[str] = None) -> Worker:
        worker_id = self.create(first_name=first_name, last_name=last_name, email=email, password_hash="x")
        return self._by_id[worker_id]

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        return self._by_id.get(worker_id)

    def get_by_email(self, email: str) -> Optional[Worker]:
        for w in self._by_id.values():
            if w.email and w.email.lower() == email.lower():
                return w
        return None

    def get_many(self, worker_ids):
        return [self._by_id[w] for w in worker_ids if w in self._by_id]

    def create(self, *, first_name, last_name, email, password_hash) -> int:
        self._id += 1
        self._by_id[self._id] = Worker(
            worker_id=self._id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
        )
        return self._id


class InMemoryWorkplaces:
    def __init__(self):
        self._by_id: dict[int, Workplace] = {}
        self._id = 0

    def add(self, name: str = "") -> Workplace:
        workplace_id = self.create(name=name or f"shop-{self._id + 1}")
        return self._by_id[workplace_id]

    def get_by_id(self, workplace_id: int) -> Optional[Workplace]:
        return self._by_id.get(workplace_id)

    def get_by_name(self, name: str) -> Optional[Workplace]:
        return next((w for w in self._by_id.values() if w.name == name), None)

    def create(self, *, name: str) -> int:
        self._id += 1
        self._by_id[self._id] = Workplace(workplace_id=self._id, name=name)
        return self._id


class _InMemoryContractScope:
    def __init__(self, repo: "InMemoryContracts", worker_id: int, workplace_id: int):
        self._repo = repo
        self._worker_id = worker_id
        self._workplace_id = workplace_id

    def existing(self):
        return self._repo.list_for_worker_and_workplace(worker_id=self._worker_id, workplace_id=self._workplace_id)

    def insert(self, contract: Contract) -> int:
        return self._repo._insert(contract)

    def set_end(self, contract_id: int, ends_at) -> bool:
        c = self._repo._by_id.get(contract_id)
        if not c:
            return False
        self._repo._by_id[contract_id] = replace(c, active_period=Interval(c.starts_at, ends_at))
        return True


class InMemoryContracts:
    def __init__(self):
        self._by_id: dict[int, Contract] = {}
        self._id = 0
        self._lock = threading.Lock()
        self.exclusive_calls = 0

    def add(self, *, worker_id: int, workplace_id: int, starts_at: str, ends_at: Optional[str] = None, hourly_rate="10") -> Contract:
        """Store a contract without validation, like a test factory."""
        contract_id = self._insert(
            Contract(
                contract_id=None,
                worker_id=worker_id,
                workplace_id=workplace_id,
                hourly_rate=Decimal(str(hourly_rate)),
                active_period=Interval(dt(starts_at), dt(ends_at) if ends_at else None),
            )
        )
        return self._by_id[contract_id]

    def _insert(self, contract: Contract) -> int:
        self._id += 1
        self._by_id[self._id] = replace(contract, contract_id=self._id)
        return self._id

    def get_by_id(self, contract_id: int) -> Optional[Contract]:
        return self._by_id.get(contract_id)

    def list_for_worker_and_workplace(self, *, worker_id, workplace_id, overlapping=None):
        items = [
            c
            for c in self._by_id.values()
            if c.worker_id == worker_id
            and c.workplace_id == workplace_id
            and (overlapping is None or overlaps(c.active_period, overlapping))
        ]
        return sorted(items, key=lambda c: c.starts_at)

    def list_for_workplace(self, *, workplace_id, overlapping=None):
        return [
            c
            for c in self._by_id.values()
            if c.workplace_id == workplace_id and (overlapping is None or overlaps(c.active_period, overlapping))
        ]

    @contextmanager
    def exclusive(self, *, worker_id, workplace_id):
        with self._lock:
            self.exclusive_calls += 1
            yield _InMemoryContractScope(self, worker_id, workplace_id)


class InMemoryShifts:
    def __init__(self):
        self._by_id: dict[int, Shift] = {}
        self._id = 0

    def add(
        self,
        *,
        workplace_id: int,
        worker_id: Optional[int],
        starts_at: str,
        ends_at: str,
        category: ShiftCategory = ShiftCategory.WORK,
    ) -> Shift:
        shift_id = self.insert(
            Shift(
                shift_id=None,
                workplace_id=workplace_id,
                worker_id=worker_id,
                category=category,
                period=Interval(dt(starts_at), dt(ends_at)),
            )
        )
        return self._by_id[shift_id]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self._by_id.get(shift_id)

    def list_for_worker(self, *, worker_id, workplace_id=None, categories=None, starting_within=None):
        items = [
            s
            for s in self._by_id.values()
            if s.worker_id == worker_id
            and (workplace_id is None or s.workplace_id == workplace_id)
            and (not categories or s.category in categories)
            and (starting_within is None or includes(starting_within, s.starts_at))
        ]
        return sorted(items, key=lambda s: s.starts_at)

    def insert(self, shift: Shift) -> int:
        self._id += 1
        self._by_id[self._id] = replace(shift, shift_id=self._id)
        return self._id

    def update(self, shift: Shift) -> bool:
        if shift.shift_id not in self._by_id:
            return False
        self._by_id[shift.shift_id] = shift
        return True


@pytest.fixture
def workers() -> InMemoryWorkers:
    return InMemoryWorkers()


@pytest.fixture
def workplaces() -> InMemoryWorkplaces:
    return InMemoryWorkplaces()


@pytest.fixture
def contracts() -> InMemoryContracts:
    return InMemoryContracts()


@pytest.fixture
def shifts() -> InMemoryShifts:
    return InMemoryShifts()


@pytest.fixture
def worker(workers):
    return workers.add()


@pytest.fixture
def shop(workplaces):
    return workplaces.add("Skello Shop")
