from __future__ import annotations

from typing import Collection, Optional, Protocol, Sequence

from ..common.intervals import Interval
from ..core.enums import ShiftCategory
from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_for_worker(
        self,
        *,
        worker_id: int,
        workplace_id: Optional[int] = None,
        categories: Optional[Collection[ShiftCategory]] = None,
        starting_within: Optional[Interval] = None,
    ) -> Sequence[Shift]:
        """Shifts of one worker, optionally narrowed to a workplace, categories
        and a window their start instant must fall in."""

        raise NotImplementedError

    def insert(self, shift: Shift) -> int:
        raise NotImplementedError

    def update(self, shift: Shift) -> bool:
        raise NotImplementedError
