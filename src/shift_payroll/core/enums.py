from __future__ import annotations

from enum import Enum
from typing import Optional


class ShiftCategory(str, Enum):
    """Loại ca: làm việc, nghỉ có lương, nghỉ không lương."""

    WORK = "work"
    PAID_ABSENCE = "paid_absence"
    UNPAID_ABSENCE = "unpaid_absence"

    @property
    def is_payable(self) -> bool:
        return self in PAYABLE_CATEGORIES

    @classmethod
    def parse(cls, value) -> Optional["ShiftCategory"]:
        """Category from an enum member or its stored value; None when unknown."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


PAYABLE_CATEGORIES = frozenset({ShiftCategory.WORK, ShiftCategory.PAID_ABSENCE})


class CapScope(str, Enum):
    """Which sibling shifts count toward an aggregate duration cap."""

    WORKPLACE = "workplace"
    WORKER = "worker"


class ViolationCode(str, Enum):
    """Mã lỗi nghiệp vụ trả về khi kiểm tra dữ liệu."""

    MISSING_FIELD = "missing_field"
    END_BEFORE_START = "end_before_start"
    SHIFT_TOO_LONG = "shift_too_long"
    MAX_DAILY_DURATION_EXCEEDED = "max_daily_duration_exceeded"
    MAX_WEEKLY_DURATION_EXCEEDED = "max_weekly_duration_exceeded"
    OVERLAPPING_CONTRACT = "overlapping_contract"
    INVALID_HOURLY_RATE = "invalid_hourly_rate"
    INVALID_EMAIL = "invalid_email"
    EMAIL_TAKEN = "email_taken"
    NAME_TAKEN = "name_taken"
