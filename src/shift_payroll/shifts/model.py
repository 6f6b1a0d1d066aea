from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional, Union

from ..common import intervals
from ..common.intervals import Interval
from ..core.constants import SECONDS_PER_HOUR
from ..core.enums import ShiftCategory


@dataclass(frozen=True)
class Shift:
    """Thực thể miền (domain): Ca làm việc / ca nghỉ của một nhân viên."""

    shift_id: Optional[int]
    workplace_id: int
    worker_id: Optional[int]
    category: ShiftCategory
    period: Interval

    @property
    def starts_at(self) -> datetime:
        return self.period.start

    @property
    def ends_at(self) -> datetime:
        return self.period.end

    @property
    def is_assigned(self) -> bool:
        return self.worker_id is not None

    @property
    def is_payable(self) -> bool:
        return self.category.is_payable

    @property
    def duration(self) -> timedelta:
        return intervals.duration(self.period)

    @property
    def duration_seconds(self) -> int:
        # Whole seconds; billing never goes below that.
        return self.duration // timedelta(seconds=1)

    @property
    def duration_in_hours(self) -> Decimal:
        return Decimal(self.duration_seconds) / SECONDS_PER_HOUR


@dataclass(frozen=True)
class ShiftDraft:
    """Unvalidated input for creating (no id) or editing (with id) a shift."""

    shift_id: Optional[int] = None
    workplace_id: Optional[int] = None
    worker_id: Optional[int] = None
    category: Optional[ShiftCategory] = ShiftCategory.WORK
    starts_at: Union[date, datetime, None] = None
    ends_at: Union[date, datetime, None] = None
