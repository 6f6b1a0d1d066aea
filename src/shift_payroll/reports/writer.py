from __future__ import annotations

import csv
from pathlib import Path
from typing import Protocol, Sequence, TextIO, Union

from ..core.constants import DEFAULT_REPORT_DELIMITER
from .model import HEADERS, MonthlyReportRow

Destination = Union[str, Path, TextIO]


class ReportWriter(Protocol):
    def write(self, rows: Sequence[MonthlyReportRow], destination: Destination) -> None:
        raise NotImplementedError


class CsvReportWriter(ReportWriter):
    def __init__(self, *, delimiter: str = DEFAULT_REPORT_DELIMITER):
        self._delimiter = delimiter

    def write(self, rows: Sequence[MonthlyReportRow], destination: Destination) -> None:
        if hasattr(destination, "write"):
            self._write_to(rows, destination)
            return
        with open(destination, "w", newline="", encoding="utf-8") as out:
            self._write_to(rows, out)

    def _write_to(self, rows: Sequence[MonthlyReportRow], out: TextIO) -> None:
        writer = csv.DictWriter(out, fieldnames=list(HEADERS), delimiter=self._delimiter)
        writer.writeheader()
        for row in rows:
            writer.writerow(row.as_record())
