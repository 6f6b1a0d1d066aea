from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import calendar_month
from ..common.intervals import Interval, includes
from ..common.money import hours_from_seconds
from ..contracts.model import Contract
from ..contracts.repository import ContractRepository
from ..contracts.validator import ContractOverlapValidator
from ..core.enums import ShiftCategory
from ..core.exceptions import ArgumentError, RecordNotFoundError
from ..payroll.service import WageService
from ..shifts.repository import ShiftRepository
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from ..workplaces.repository import WorkplaceRepository
from .model import MonthlyReportRow
from .writer import CsvReportWriter, Destination, ReportWriter

log = logging.getLogger(__name__)


class MonthlyReportService:
    """Per-workplace monthly summary: one row per worker under contract that month."""

    def __init__(
        self,
        workplaces: WorkplaceRepository,
        workers: WorkerRepository,
        contracts: ContractRepository,
        shifts: ShiftRepository,
        wages: WageService,
        *,
        writer: Optional[ReportWriter] = None,
        contract_validator: Optional[ContractOverlapValidator] = None,
    ):
        self._workplaces = workplaces
        self._workers = workers
        self._contracts = contracts
        self._shifts = shifts
        self._wages = wages
        self._writer = writer or CsvReportWriter()
        self._contract_validator = contract_validator or ContractOverlapValidator()

    def generate(
        self,
        *,
        workplace_id: int,
        month: Union[date, datetime, None],
        destination: Optional[Destination],
    ) -> list[MonthlyReportRow]:
        if not self._workplaces.get_by_id(workplace_id):
            raise RecordNotFoundError(f"workplace {workplace_id} not found")
        if month is None:
            raise ArgumentError("ERROR: Date is missing")
        if destination is None:
            raise ArgumentError("ERROR: File name missing")

        rows = self.build_rows(workplace_id=workplace_id, month=month)
        self._writer.write(rows, destination)
        log.info("monthly report for workplace %s (%s) written: %d rows", workplace_id, month, len(rows))
        return rows

    def build_rows(self, *, workplace_id: int, month: Union[date, datetime]) -> list[MonthlyReportRow]:
        period = calendar_month(month)
        active = self._contract_validator.active_at(
            self._contracts.list_for_workplace(workplace_id=workplace_id, overlapping=period),
            period,
        )

        by_worker: dict[int, list[Contract]] = defaultdict(list)
        for contract in active:
            by_worker[contract.worker_id].append(contract)

        # Newest contract start first.
        worker_ids = sorted(
            by_worker,
            key=lambda wid: (max(c.starts_at for c in by_worker[wid]), wid),
            reverse=True,
        )
        workers = {w.worker_id: w for w in self._workers.get_many(worker_ids)}

        rows = []
        for worker_id in worker_ids:
            worker = workers.get(worker_id)
            if worker is None:
                log.warning("contract references unknown worker %s; skipped in report", worker_id)
                continue
            rows.append(self._row_for(worker, workplace_id, period, by_worker[worker_id]))
        return rows

    def _row_for(self, worker: Worker, workplace_id: int, period: Interval, contracts: list[Contract]) -> MonthlyReportRow:
        shifts = [
            s
            for s in self._shifts.list_for_worker(
                worker_id=worker.worker_id,
                workplace_id=workplace_id,
                starting_within=period,
            )
            if s.workplace_id == workplace_id and includes(period, s.starts_at)
        ]

        counts = {category: 0 for category in ShiftCategory}
        seconds = {category: 0 for category in ShiftCategory}
        for shift in shifts:
            counts[shift.category] += 1
            seconds[shift.category] += shift.duration_seconds

        paid_seconds = seconds[ShiftCategory.WORK] + seconds[ShiftCategory.PAID_ABSENCE]
        return MonthlyReportRow(
            worker_id=worker.worker_id,
            first_name=worker.first_name,
            last_name=worker.last_name,
            email=worker.email,
            worked_count=counts[ShiftCategory.WORK],
            worked_hours=hours_from_seconds(seconds[ShiftCategory.WORK]),
            paid_absence_count=counts[ShiftCategory.PAID_ABSENCE],
            paid_absence_hours=hours_from_seconds(seconds[ShiftCategory.PAID_ABSENCE]),
            unpaid_absence_count=counts[ShiftCategory.UNPAID_ABSENCE],
            unpaid_absence_hours=hours_from_seconds(seconds[ShiftCategory.UNPAID_ABSENCE]),
            total_paid_hours=hours_from_seconds(paid_seconds),
            wages=self._wages.wages_from(shifts, contracts),
        )
