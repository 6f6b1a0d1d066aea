from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, violations: Sequence = ()):
        self.violations = tuple(violations)
        message = "; ".join(v.message for v in self.violations) or "invalid data"
        super().__init__(message)


class RecordNotFoundError(DomainError):
    """Raised when a record looked up by id does not exist."""


class ArgumentError(DomainError, ValueError):
    """Raised when a caller omits a required argument."""
