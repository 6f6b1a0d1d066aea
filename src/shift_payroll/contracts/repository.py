from __future__ import annotations

from datetime import datetime
from typing import ContextManager, Optional, Protocol, Sequence

from ..common.intervals import Interval
from .model import Contract


class ContractWriteScope(Protocol):
    """One serialized read-validate-write unit for a (worker, workplace) pair."""

    def existing(self) -> Sequence[Contract]:
        raise NotImplementedError

    def insert(self, contract: Contract) -> int:
        raise NotImplementedError

    def set_end(self, contract_id: int, ends_at: Optional[datetime]) -> bool:
        raise NotImplementedError


class ContractRepository(Protocol):
    def get_by_id(self, contract_id: int) -> Optional[Contract]:
        raise NotImplementedError

    def list_for_worker_and_workplace(
        self,
        *,
        worker_id: int,
        workplace_id: int,
        overlapping: Optional[Interval] = None,
    ) -> Sequence[Contract]:
        raise NotImplementedError

    def list_for_workplace(self, *, workplace_id: int, overlapping: Optional[Interval] = None) -> Sequence[Contract]:
        raise NotImplementedError

    def exclusive(self, *, worker_id: int, workplace_id: int) -> ContextManager[ContractWriteScope]:
        """Hold a write lock for the pair until the block exits.

        Concurrent writers for the same pair must not both read a stale set of
        existing contracts, otherwise the no-overlap invariant can be broken.
        """

        raise NotImplementedError
