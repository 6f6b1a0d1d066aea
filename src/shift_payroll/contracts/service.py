from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..common.datetime_utils import as_datetime, beginning_of_day
from ..common.intervals import Interval
from ..core.constants import HOURLY_RATE_STEP, MAX_HOURLY_RATE
from ..core.enums import ViolationCode
from ..core.exceptions import DomainError, RecordNotFoundError
from ..core.validation import ValidationResult, Violation, end_before_start, missing_field
from ..workers.repository import WorkerRepository
from ..workplaces.repository import WorkplaceRepository
from .model import Contract, ContractDraft
from .repository import ContractRepository
from .validator import ContractOverlapValidator

log = logging.getLogger(__name__)


def _parse_hourly_rate(value) -> tuple[Optional[Decimal], Optional[Violation]]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None, Violation(ViolationCode.INVALID_HOURLY_RATE, field="hourly_rate", message="hourly_rate is missing")
    try:
        # str() first so floats like 12.5 keep their written value
        rate = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return None, Violation(ViolationCode.INVALID_HOURLY_RATE, field="hourly_rate", message="hourly_rate is not a number")
    if not rate.is_finite():
        return None, Violation(ViolationCode.INVALID_HOURLY_RATE, field="hourly_rate", message="hourly_rate is not a number")
    if rate < 0:
        return None, Violation(ViolationCode.INVALID_HOURLY_RATE, field="hourly_rate", message="hourly_rate must be >= 0")
    if rate > Decimal(MAX_HOURLY_RATE):
        return None, Violation(ViolationCode.INVALID_HOURLY_RATE, field="hourly_rate", message="hourly_rate is too large")
    if rate != rate.quantize(Decimal(HOURLY_RATE_STEP)):
        return None, Violation(
            ViolationCode.INVALID_HOURLY_RATE, field="hourly_rate", message="hourly_rate has more than 4 decimal places"
        )
    return rate, None


class ContractService:
    """Use case: create and close contracts without ever letting two overlap."""

    def __init__(
        self,
        contracts: ContractRepository,
        workers: WorkerRepository,
        workplaces: WorkplaceRepository,
        *,
        validator: Optional[ContractOverlapValidator] = None,
    ):
        self._contracts = contracts
        self._workers = workers
        self._workplaces = workplaces
        self._validator = validator or ContractOverlapValidator()

    def _check_references(self, draft: ContractDraft) -> list[Violation]:
        violations: list[Violation] = []
        if draft.worker_id is None or not self._workers.get_by_id(draft.worker_id):
            violations.append(missing_field("worker_id"))
        if draft.workplace_id is None or not self._workplaces.get_by_id(draft.workplace_id):
            violations.append(missing_field("workplace_id"))
        return violations

    def create(self, draft: ContractDraft) -> ValidationResult:
        violations = self._check_references(draft)

        rate, rate_error = _parse_hourly_rate(draft.hourly_rate)
        if rate_error:
            violations.append(rate_error)

        start = end = None
        if draft.starts_at is None:
            violations.append(missing_field("starts_at"))
        else:
            start = beginning_of_day(draft.starts_at)
            end = as_datetime(draft.ends_at) if draft.ends_at is not None else None
            if end is not None and end <= start:
                violations.append(end_before_start())

        if violations:
            return self._rejected(draft.worker_id, draft.workplace_id, violations)

        candidate = Contract(
            contract_id=None,
            worker_id=int(draft.worker_id),
            workplace_id=int(draft.workplace_id),
            hourly_rate=rate,
            active_period=Interval(start, end),
        )
        with self._contracts.exclusive(worker_id=candidate.worker_id, workplace_id=candidate.workplace_id) as scope:
            overlap = self._validator.validate(candidate, scope.existing())
            if overlap:
                return self._rejected(candidate.worker_id, candidate.workplace_id, overlap)
            contract_id = scope.insert(candidate)

        log.info(
            "contract %s created for worker %s at workplace %s (rate=%s, %s -> %s)",
            contract_id, candidate.worker_id, candidate.workplace_id, rate, start, end or "open",
        )
        return ValidationResult(record_id=contract_id)

    def close(self, *, contract_id: int, ends_at: Union[date, datetime]) -> ValidationResult:
        contract = self._contracts.get_by_id(contract_id)
        if not contract:
            raise RecordNotFoundError(f"contract {contract_id} not found")

        end = as_datetime(ends_at)
        with self._contracts.exclusive(worker_id=contract.worker_id, workplace_id=contract.workplace_id) as scope:
            existing = scope.existing()
            # Re-read under the lock; the earlier lookup only locates the scope.
            current = next((c for c in existing if c.contract_id == contract_id), None)
            if current is None:
                raise RecordNotFoundError(f"contract {contract_id} not found")
            if current.ends_at is not None:
                raise DomainError(f"contract {contract_id} is already closed")
            if end <= current.starts_at:
                return self._rejected(current.worker_id, current.workplace_id, [end_before_start()])

            closed = replace(current, active_period=Interval(current.starts_at, end))
            overlap = self._validator.validate(closed, existing)
            if overlap:
                return self._rejected(current.worker_id, current.workplace_id, overlap)
            scope.set_end(contract_id, end)

        log.info("contract %s closed at %s", contract_id, end)
        return ValidationResult(record_id=contract_id)

    def active_at(self, *, workplace_id: int, period: Interval) -> list[Contract]:
        candidates = self._contracts.list_for_workplace(workplace_id=workplace_id, overlapping=period)
        return self._validator.active_at(candidates, period)

    def contains_period(self, contract: Contract, period: Interval) -> bool:
        return self._validator.contains_period(contract, period)

    def _rejected(self, worker_id, workplace_id, violations) -> ValidationResult:
        result = ValidationResult(tuple(violations))
        log.info(
            "contract rejected for worker %s at workplace %s: %s",
            worker_id, workplace_id, [c.value for c in result.codes],
            extra={"worker_id": worker_id, "workplace_id": workplace_id, "violations": [c.value for c in result.codes]},
        )
        return result
