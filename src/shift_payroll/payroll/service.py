from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from ..common.datetime_utils import calendar_month
from ..common.intervals import includes
from ..common.money import round_money
from ..contracts.model import Contract
from ..contracts.repository import ContractRepository
from ..contracts.validator import ContractOverlapValidator
from ..core.constants import SECONDS_PER_HOUR
from ..core.enums import PAYABLE_CATEGORIES
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator

log = logging.getLogger(__name__)


class WageService:
    """Monthly wages of a worker at one workplace.

    Each payable shift is paid at the rate of the contract whose active period
    includes the shift's start instant. This relies on contracts of a
    (worker, workplace) never overlapping; a shift with no matching contract
    contributes nothing and is logged.
    """

    def __init__(
        self,
        shifts: ShiftRepository,
        contracts: ContractRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        contract_validator: Optional[ContractOverlapValidator] = None,
    ):
        self._shifts = shifts
        self._contracts = contracts
        self._calculator = calculator or StandardPayrollCalculator()
        self._contract_validator = contract_validator or ContractOverlapValidator()

    def monthly_wages(self, *, worker_id: int, workplace_id: int, month: Union[date, datetime]) -> Decimal:
        period = calendar_month(month)
        shifts = self._shifts.list_for_worker(
            worker_id=worker_id,
            workplace_id=workplace_id,
            categories=tuple(PAYABLE_CATEGORIES),
            starting_within=period,
        )
        contracts = self._contracts.list_for_worker_and_workplace(
            worker_id=worker_id,
            workplace_id=workplace_id,
            overlapping=period,
        )
        month_shifts = [s for s in shifts if includes(period, s.starts_at)]
        return self.wages_from(month_shifts, contracts)

    def wages_from(self, shifts: Iterable[Shift], contracts: Sequence[Contract]) -> Decimal:
        """Total pay for already-selected shifts, rounded to cents."""
        total = Decimal(0)
        for shift in shifts:
            if not shift.is_payable or not shift.is_assigned:
                continue
            contract = self._contract_validator.contract_at(contracts, shift.starts_at)
            if contract is None:
                log.warning(
                    "shift %s of worker %s at workplace %s has no active contract at %s; not paid",
                    shift.shift_id, shift.worker_id, shift.workplace_id, shift.starts_at,
                    extra={"worker_id": shift.worker_id, "workplace_id": shift.workplace_id},
                )
                continue
            total += self._calculator.rated_seconds(shift, contract)
        return round_money(total / SECONDS_PER_HOUR)
