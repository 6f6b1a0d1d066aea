from __future__ import annotations

import re
from typing import Any, Optional

from ..core.validation import Violation, missing_field

# Same shape as the usual HTML5 / mail-to address check: one '@', no spaces.
EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def require_present(value: Any, field_name: str) -> Optional[Violation]:
    if value is None:
        return missing_field(field_name)
    if isinstance(value, str) and not value.strip():
        return missing_field(field_name)
    return None


def normalize_email(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip().lower()


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value))
