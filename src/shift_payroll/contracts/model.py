from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from ..common.intervals import Interval


@dataclass(frozen=True)
class Contract:
    """Thực thể miền (domain): Hợp đồng lao động.

    `active_period` is the half-open range during which `hourly_rate` applies;
    an open end means the contract has not been closed yet.
    """

    contract_id: Optional[int]
    worker_id: int
    workplace_id: int
    hourly_rate: Decimal
    active_period: Interval

    @property
    def starts_at(self) -> datetime:
        return self.active_period.start

    @property
    def ends_at(self) -> Optional[datetime]:
        return self.active_period.end


@dataclass(frozen=True)
class ContractDraft:
    """Unvalidated input for a new contract; any field may be missing."""

    worker_id: Optional[int] = None
    workplace_id: Optional[int] = None
    hourly_rate: Union[Decimal, int, float, str, None] = None
    starts_at: Union[date, datetime, None] = None
    ends_at: Union[date, datetime, None] = None
