from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.intervals import Interval, contains, includes, overlaps
from ..core.enums import ViolationCode
from ..core.validation import Violation
from .model import Contract


@dataclass
class ContractOverlapValidator:
    """Keeps a worker's contracts at one workplace from overlapping in time."""

    def validate(self, candidate: Contract, existing: Iterable[Contract]) -> list[Violation]:
        for other in existing:
            if candidate.contract_id is not None and other.contract_id == candidate.contract_id:
                continue
            if (other.worker_id, other.workplace_id) != (candidate.worker_id, candidate.workplace_id):
                continue
            if overlaps(candidate.active_period, other.active_period):
                return [
                    Violation(
                        ViolationCode.OVERLAPPING_CONTRACT,
                        message=f"contract overlaps contract {other.contract_id}",
                    )
                ]
        return []

    def active_at(self, contracts: Iterable[Contract], period: Interval) -> list[Contract]:
        """Contracts in effect at some point of `period` (overlap, not containment)."""
        return [c for c in contracts if overlaps(c.active_period, period)]

    def contains_period(self, contract: Contract, period: Interval) -> bool:
        return contains(contract.active_period, period)

    def contract_at(self, contracts: Sequence[Contract], instant: datetime) -> Optional[Contract]:
        for contract in contracts:
            if includes(contract.active_period, instant):
                return contract
        return None
