"""CSV import/export orchestration.

The CLI delegates the whole transfer flow to these helpers, which keeps
side-effects (printing, progress bars) out of the core logic: progress is
reported through `TransferHooks` callbacks and never affects control flow.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Protocol, TextIO

from core.domain.models import TimeRecord
from core.errors import TogglCsvError, TransferError
from core.interfaces.repositories import TimeRecordProvider
from core.logger import get_logger

logger = get_logger(__name__)


class RecordMapper(Protocol):
    """What the transfer flow needs from the tabular adapter."""

    @property
    def column_names(self) -> list[str]:
        ...

    def get_time_records(self, rows: list[list[str]]) -> list[TimeRecord]:
        ...

    def get_row(self, record: TimeRecord) -> list[str]:
        ...


@dataclass
class TransferHooks:
    """Optional callbacks for UI layers (progress)."""

    started: Callable[[int], None] | None = None
    advanced: Callable[[int, int], None] | None = None
    finished: Callable[[], None] | None = None


@dataclass
class ImportResult:
    """Output of an import run."""

    created: list[TimeRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.created)


class CsvExporter:
    """Writes every time record of a date window as CSV."""

    def __init__(self, mapper: RecordMapper, time_records: TimeRecordProvider) -> None:
        self._mapper = mapper
        self._time_records = time_records

    def export(self, start: datetime, end: datetime, writer: TextIO) -> int:
        """Write the header, then one row per record. Returns the row count."""

        csv_writer = csv.writer(writer, lineterminator="\n")
        csv_writer.writerow(self._mapper.column_names)
        writer.flush()

        try:
            records = self._time_records.get_time_records(start, end)
        except TogglCsvError as exc:
            raise TransferError(f"Failed to retrieve time records between {start} and {end}") from exc

        for record in records:
            csv_writer.writerow(self._mapper.get_row(record))
        writer.flush()

        logger.info("Exported %d time records", len(records))
        return len(records)


class CsvImporter:
    """Reads CSV time records and creates them in Toggl, one by one."""

    def __init__(
        self,
        mapper: RecordMapper,
        time_records: TimeRecordProvider,
        hooks: TransferHooks | None = None,
    ) -> None:
        self._mapper = mapper
        self._time_records = time_records
        self._hooks = hooks or TransferHooks()

    def import_records(self, reader: TextIO) -> ImportResult:
        try:
            rows = [row for row in csv.reader(reader) if row]
        except csv.Error as exc:
            raise TransferError("Failed to read time records from CSV") from exc

        try:
            records = self._mapper.get_time_records(rows)
        except TogglCsvError as exc:
            raise TransferError("Failed to map the CSV rows to time records") from exc

        result = ImportResult()
        if not records:
            return result

        total = len(records)
        if self._hooks.started:
            self._hooks.started(total)

        for index, record in enumerate(records, start=1):
            try:
                self._time_records.create_time_record(record)
            except TogglCsvError as exc:
                raise TransferError(f"Failed to create time record {index} of {total}") from exc

            result.created.append(record)
            if self._hooks.advanced:
                self._hooks.advanced(index, total)

        if self._hooks.finished:
            self._hooks.finished()

        logger.info("Imported %d time records", total)
        return result
