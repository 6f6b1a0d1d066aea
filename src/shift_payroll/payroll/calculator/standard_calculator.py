from __future__ import annotations

from decimal import Decimal

from ...contracts.model import Contract
from ...shifts.model import Shift
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: payable shifts are paid their full length at the contract rate."""

    def billable_seconds(self, shift: Shift) -> int:
        if not shift.is_payable:
            return 0
        return max(shift.duration_seconds, 0)

    def rated_seconds(self, shift: Shift, contract: Contract) -> Decimal:
        return Decimal(self.billable_seconds(shift)) * contract.hourly_rate
