from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...contracts.model import Contract
from ...shifts.model import Shift


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Amounts are kept in rate x seconds so that summing many shifts stays exact;
    the caller converts to hours once, after summing.
    """

    @abstractmethod
    def billable_seconds(self, shift: Shift) -> int:
        raise NotImplementedError

    @abstractmethod
    def rated_seconds(self, shift: Shift, contract: Contract) -> Decimal:
        raise NotImplementedError
