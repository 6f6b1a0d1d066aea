from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .contracts.mysql_contract_repository import MySQLContractRepository
from .contracts.service import ContractService
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import WageService
from .reports.service import MonthlyReportService
from .reports.writer import CsvReportWriter
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.policy import DurationPolicy
from .shifts.service import ShiftService
from .shifts.validator import ShiftDurationValidator
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.service import WorkerService
from .workplaces.mysql_workplace_repository import MySQLWorkplaceRepository
from .workplaces.service import WorkplaceService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    workers_repo: MySQLWorkerRepository
    workplaces_repo: MySQLWorkplaceRepository
    contracts_repo: MySQLContractRepository
    shifts_repo: MySQLShiftRepository

    worker_service: WorkerService
    workplace_service: WorkplaceService
    contract_service: ContractService
    shift_service: ShiftService
    wage_service: WageService
    monthly_report_service: MonthlyReportService


def build_container(*, settings: ModuleType, policy: Optional[DurationPolicy] = None) -> Container:
    db_config = dict(settings.DB_CONFIG)
    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config)

    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    workers_repo = MySQLWorkerRepository(conn)
    workplaces_repo = MySQLWorkplaceRepository(conn)
    contracts_repo = MySQLContractRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)

    policy = policy or DurationPolicy.from_settings(settings)

    worker_service = WorkerService(workers_repo)
    workplace_service = WorkplaceService(workplaces_repo)
    contract_service = ContractService(contracts_repo, workers_repo, workplaces_repo)
    shift_service = ShiftService(
        shifts_repo,
        workers_repo,
        workplaces_repo,
        validator=ShiftDurationValidator(shifts_repo, policy=policy),
    )
    wage_service = WageService(shifts_repo, contracts_repo)
    monthly_report_service = MonthlyReportService(
        workplaces_repo,
        workers_repo,
        contracts_repo,
        shifts_repo,
        wage_service,
        writer=CsvReportWriter(delimiter=getattr(settings, "REPORT_DELIMITER", ";")),
    )

    return Container(
        conn=conn,
        workers_repo=workers_repo,
        workplaces_repo=workplaces_repo,
        contracts_repo=contracts_repo,
        shifts_repo=shifts_repo,
        worker_service=worker_service,
        workplace_service=workplace_service,
        contract_service=contract_service,
        shift_service=shift_service,
        wage_service=wage_service,
        monthly_report_service=monthly_report_service,
    )
