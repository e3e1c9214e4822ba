"""CSV rows <-> TimeRecord.

Por qué está en adapters:
- El formato tabular (columnas, separador de tags, fechas) es un detalle de
  I/O; el Core solo conoce `TimeRecord`.
"""

from __future__ import annotations

from typing import Sequence

from adapters.date_format import format_date, parse_date
from core.domain.models import TimeRecord
from core.errors import RecordValidationError

COLUMN_NAMES: tuple[str, ...] = (
    "Start",
    "Stop",
    "Workspace Name",
    "Project Name",
    "Client Name",
    "Tag(s)",
    "Description",
)
TAGS_SEPARATOR = ","
MAX_DESCRIPTION_LENGTH = 3000


class CsvTimeRecordMapper:
    """Maps CSV rows to time records and back."""

    def __init__(self, *, tags_separator: str = TAGS_SEPARATOR) -> None:
        self._tags_separator = tags_separator

    @property
    def column_names(self) -> list[str]:
        return list(COLUMN_NAMES)

    def get_time_records(self, rows: Sequence[Sequence[str]]) -> list[TimeRecord]:
        """Map every row; a leading header row is skipped."""

        if rows and rows[0] and rows[0][0] == COLUMN_NAMES[0]:
            rows = rows[1:]

        records: list[TimeRecord] = []
        for row in rows:
            try:
                records.append(self.get_time_record(row))
            except RecordValidationError as exc:
                raise RecordValidationError(f"Failed to create time record from {list(row)!r}") from exc
        return records

    def get_time_record(self, row: Sequence[str]) -> TimeRecord:
        if len(row) != len(COLUMN_NAMES):
            raise RecordValidationError(
                f"Wrong number of values in the given row. Required: {len(COLUMN_NAMES)}. Given: {len(row)}"
            )

        start_raw, stop_raw, workspace, project, client, tags_raw, description_raw = row

        try:
            start = parse_date(start_raw)
        except RecordValidationError as exc:
            raise RecordValidationError("Cannot parse the start date") from exc
        try:
            stop = parse_date(stop_raw)
        except RecordValidationError as exc:
            raise RecordValidationError("Cannot parse the stop date") from exc

        # Toggl reads a negative duration as a running timer.
        if stop <= start:
            raise RecordValidationError(
                f"The stop date {format_date(stop)} is not after the start date {format_date(start)}"
            )

        description = description_raw.strip()
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise RecordValidationError(f"The description text of the time entry {format_date(start)} is too long")

        tags = tuple(tag.strip() for tag in tags_raw.split(self._tags_separator) if tag.strip())

        return TimeRecord(
            start=start,
            stop=stop,
            workspace_name=workspace.strip(),
            project_name=project.strip(),
            client_name=client.strip(),
            description=description,
            tags=tags,
        )

    def get_row(self, record: TimeRecord) -> list[str]:
        return [
            format_date(record.start),
            format_date(record.stop),
            record.workspace_name,
            record.project_name,
            record.client_name,
            self._tags_separator.join(record.tags),
            record.description,
        ]
