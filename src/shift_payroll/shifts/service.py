from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import as_datetime
from ..common.intervals import Interval
from ..core.enums import ShiftCategory
from ..core.exceptions import RecordNotFoundError
from ..core.validation import ValidationResult, Violation, missing_field
from ..workers.repository import WorkerRepository
from ..workplaces.repository import WorkplaceRepository
from .model import Shift, ShiftDraft
from .repository import ShiftRepository
from .validator import ShiftDurationValidator

log = logging.getLogger(__name__)


class ShiftService:
    """Use case: validate then persist a shift (create or edit)."""

    def __init__(
        self,
        shifts: ShiftRepository,
        workers: WorkerRepository,
        workplaces: WorkplaceRepository,
        *,
        validator: Optional[ShiftDurationValidator] = None,
    ):
        self._shifts = shifts
        self._workers = workers
        self._workplaces = workplaces
        self._validator = validator or ShiftDurationValidator(shifts)

    def validate(self, draft: ShiftDraft) -> list[Violation]:
        violations: list[Violation] = []
        if draft.workplace_id is not None and not self._workplaces.get_by_id(draft.workplace_id):
            violations.append(missing_field("workplace_id"))
        if draft.worker_id is not None and not self._workers.get_by_id(draft.worker_id):
            violations.append(missing_field("worker_id"))
        violations.extend(self._validator.validate(draft))
        return violations

    def save(self, draft: ShiftDraft) -> ValidationResult:
        if draft.shift_id is not None and not self._shifts.get_by_id(draft.shift_id):
            raise RecordNotFoundError(f"shift {draft.shift_id} not found")

        violations = self.validate(draft)
        if violations:
            codes = [v.code.value for v in violations]
            log.info(
                "shift rejected for worker %s at workplace %s: %s",
                draft.worker_id, draft.workplace_id, codes,
                extra={"worker_id": draft.worker_id, "workplace_id": draft.workplace_id, "violations": codes},
            )
            return ValidationResult(tuple(violations))

        shift = Shift(
            shift_id=draft.shift_id,
            workplace_id=int(draft.workplace_id),
            worker_id=int(draft.worker_id) if draft.worker_id is not None else None,
            category=ShiftCategory.parse(draft.category),
            period=Interval(as_datetime(draft.starts_at), as_datetime(draft.ends_at)),
        )
        if shift.shift_id is None:
            shift_id = self._shifts.insert(shift)
            log.info("shift %s created (%s, %s -> %s)", shift_id, shift.category.value, shift.starts_at, shift.ends_at)
        else:
            self._shifts.update(shift)
            shift_id = shift.shift_id
            log.info("shift %s updated", shift_id)
        return ValidationResult(record_id=shift_id)
