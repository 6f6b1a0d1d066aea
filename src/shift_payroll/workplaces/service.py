from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_present
from ..core.enums import ViolationCode
from ..core.validation import ValidationResult, Violation
from .repository import WorkplaceRepository

log = logging.getLogger(__name__)


class WorkplaceService:
    def __init__(self, workplaces: WorkplaceRepository):
        self._workplaces = workplaces

    def create(self, *, name: Optional[str]) -> ValidationResult:
        missing = require_present(name, "name")
        if missing:
            return ValidationResult((missing,))

        name = name.strip()
        if self._workplaces.get_by_name(name):
            return ValidationResult(
                (Violation(ViolationCode.NAME_TAKEN, field="name", message=f"workplace {name!r} already exists"),)
            )

        workplace_id = self._workplaces.create(name=name)
        log.info("workplace %s created (%r)", workplace_id, name)
        return ValidationResult(record_id=workplace_id)
