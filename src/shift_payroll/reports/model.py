from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

HEADERS = (
    "Firstname",
    "Lastname",
    "Email",
    "Number of worked shifts",
    "Total of worked hours",
    "Number of paid absence shifts",
    "Total of paid absences hours",
    "Number of unpaid absence shifts",
    "Total of unpaid absence hours",
    "Total of paid hours",
    "Wages",
)


@dataclass(frozen=True)
class MonthlyReportRow:
    """Read-model: one worker's month at one workplace."""

    worker_id: int
    first_name: str
    last_name: str
    email: Optional[str]
    worked_count: int
    worked_hours: Decimal
    paid_absence_count: int
    paid_absence_hours: Decimal
    unpaid_absence_count: int
    unpaid_absence_hours: Decimal
    total_paid_hours: Decimal
    wages: Decimal

    def as_record(self) -> dict[str, str]:
        values = (
            self.first_name,
            self.last_name,
            self.email or "",
            self.worked_count,
            self.worked_hours,
            self.paid_absence_count,
            self.paid_absence_hours,
            self.unpaid_absence_count,
            self.unpaid_absence_hours,
            self.total_paid_hours,
            self.wages,
        )
        return {header: str(value) for header, value in zip(HEADERS, values)}
