"""Ví dụ: dùng service layer trực tiếp (không qua giao diện).

Creates a workplace, a worker, a contract and two shifts, then writes the
monthly report for that workplace to monthly_report.csv.
"""

from datetime import date, datetime

from shift_payroll.config import load_settings
from shift_payroll.container import build_container
from shift_payroll.contracts.model import ContractDraft
from shift_payroll.core.enums import ShiftCategory
from shift_payroll.logging_config import setup_logging
from shift_payroll.shifts.model import ShiftDraft


def main():
    settings = load_settings()
    setup_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    container = build_container(settings=settings)

    workplace_id = container.workplace_service.create(name="Krusty Burger").raise_for_violations().record_id
    worker_id = container.worker_service.register(
        first_name="Homer", last_name="Simpson", email="homer@example.com", password="donuts"
    ).raise_for_violations().record_id

    container.contract_service.create(
        ContractDraft(worker_id=worker_id, workplace_id=workplace_id, hourly_rate="12.50", starts_at=date(2020, 1, 1))
    ).raise_for_violations()

    for start, end, category in (
        (datetime(2020, 1, 2, 9), datetime(2020, 1, 2, 17), ShiftCategory.WORK),
        (datetime(2020, 1, 3, 9), datetime(2020, 1, 3, 13), ShiftCategory.PAID_ABSENCE),
    ):
        result = container.shift_service.save(
            ShiftDraft(workplace_id=workplace_id, worker_id=worker_id, category=category, starts_at=start, ends_at=end)
        )
        print(start, category.value, "ok" if result.ok else result.codes)

    print(container.wage_service.monthly_wages(worker_id=worker_id, workplace_id=workplace_id, month=date(2020, 1, 1)))
    container.monthly_report_service.generate(
        workplace_id=workplace_id, month=date(2020, 1, 1), destination="monthly_report.csv"
    )


if __name__ == "__main__":
    main()
