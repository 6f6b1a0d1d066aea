from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import generate_password_hash

from ..common.validators import is_valid_email, normalize_email, require_present
from ..core.enums import ViolationCode
from ..core.validation import ValidationResult, Violation
from .repository import WorkerRepository

log = logging.getLogger(__name__)


class WorkerService:
    """Use case: register workers."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def register(
        self,
        *,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> ValidationResult:
        violations: list[Violation] = []
        for value, field in ((first_name, "first_name"), (last_name, "last_name"), (password, "password")):
            missing = require_present(value, field)
            if missing:
                violations.append(missing)

        # An empty email is allowed; a non-empty one must be well-formed and unused.
        normalized = normalize_email(email)
        if normalized is not None:
            if not is_valid_email(normalized):
                violations.append(Violation(ViolationCode.INVALID_EMAIL, field="email", message="email is invalid"))
            elif self._workers.get_by_email(normalized):
                violations.append(Violation(ViolationCode.EMAIL_TAKEN, field="email", message="email is already taken"))

        if violations:
            return ValidationResult(tuple(violations))

        worker_id = self._workers.create(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=normalized,
            password_hash=generate_password_hash(password),
        )
        log.info("worker %s registered", worker_id)
        return ValidationResult(record_id=worker_id)
