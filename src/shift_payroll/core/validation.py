from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import ViolationCode
from .exceptions import ValidationError


@dataclass(frozen=True)
class Violation:
    code: ViolationCode
    field: Optional[str] = None
    message: str = ""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validated write.

    Violations are returned, not raised, so a caller can surface all of them
    at once. `record_id` is set only when the record was persisted.
    """

    violations: tuple[Violation, ...] = ()
    record_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def codes(self) -> list[ViolationCode]:
        return [v.code for v in self.violations]

    def raise_for_violations(self) -> "ValidationResult":
        if self.violations:
            raise ValidationError(self.violations)
        return self


def missing_field(field: str) -> Violation:
    return Violation(ViolationCode.MISSING_FIELD, field=field, message=f"{field} is missing")


def end_before_start(field: str = "ends_at") -> Violation:
    return Violation(ViolationCode.END_BEFORE_START, field=field, message="ends_at must be after starts_at")
