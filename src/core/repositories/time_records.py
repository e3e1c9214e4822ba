"""Time record repository: the surface used by import and export.

Reads are chunked per calendar month (see `core.domain.time_range`) and run
strictly in order, one request at a time. Writes create the project (and
client) on demand before submitting the entry.
"""

from __future__ import annotations

from datetime import datetime

from core.domain.models import TimeRecord
from core.domain.time_range import MonthlyTimeRangeProvider, TimeRange, assume_utc
from core.errors import InvalidRangeError, NotFoundError, RepositoryError, TogglCsvError
from core.interfaces.repositories import (
    ClientProvider,
    ModelConverter,
    ProjectProvider,
    TimeRangeProvider,
    WorkspaceProvider,
)
from core.interfaces.toggl_api import TimeEntryAPI
from core.logger import get_logger
from core.repositories.model_converter import TogglModelConverter

logger = get_logger(__name__)


class TimeRecordRepository:
    def __init__(
        self,
        time_entry_api: TimeEntryAPI,
        workspaces: WorkspaceProvider,
        projects: ProjectProvider,
        clients: ClientProvider,
        *,
        time_range_provider: TimeRangeProvider | None = None,
        model_converter: ModelConverter | None = None,
    ) -> None:
        self._time_entry_api = time_entry_api
        self._workspaces = workspaces
        self._projects = projects
        self._time_range_provider = time_range_provider or MonthlyTimeRangeProvider()
        self._model_converter = model_converter or TogglModelConverter(workspaces, projects, clients)

    def create_time_record(self, record: TimeRecord) -> None:
        """Submit `record`, creating its project/client first when missing.

        Nothing is rolled back: a project created here stays even if the
        time entry itself is rejected afterwards.
        """

        try:
            self._projects.get_project_by_name(record.project_name, record.workspace_name, record.client_name)
        except NotFoundError:
            logger.info(
                "Project %r not found in workspace %r, creating it",
                record.project_name,
                record.workspace_name,
            )
            try:
                self._projects.create_project(record.project_name, record.workspace_name, record.client_name)
            except TogglCsvError as exc:
                raise RepositoryError(f"Failed to create project for time record {_label(record)}") from exc
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to look up the project of time record {_label(record)}") from exc

        try:
            time_entry = self._model_converter.to_time_entry(record)
        except TogglCsvError as exc:
            raise RepositoryError(
                f"Failed to convert time record {_label(record)} into a valid time entry"
            ) from exc

        try:
            self._time_entry_api.create_time_entry(time_entry)
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to create time record {_label(record)}") from exc

    def get_time_records(self, start: datetime, end: datetime) -> list[TimeRecord]:
        """Return every finished, project-bound record between `start` and `end`.

        Records come back in chunk order, and within a chunk in the order the
        API returned them. The first failure aborts the whole call. Naive
        datetimes are taken as UTC.
        """

        start, end = assume_utc(start), assume_utc(end)
        if start > end:
            raise InvalidRangeError(f"The start date ({start}) cannot be after the end date ({end})")

        records: list[TimeRecord] = []
        for time_range in self._time_range_provider.get_time_ranges(start, end):
            records.extend(self._get_time_records(time_range))
        return records

    def _get_time_records(self, time_range: TimeRange) -> list[TimeRecord]:
        # Keep chunks short: Toggl returns at most 1000 entries per request.
        logger.info("Fetching time entries from %s to %s", time_range.start, time_range.stop)
        try:
            time_entries = self._time_entry_api.get_time_entries(time_range.start, time_range.stop)
        except TogglCsvError as exc:
            raise RepositoryError(
                f"Failed to retrieve time entries between {time_range.start} and {time_range.stop}"
            ) from exc

        records: list[TimeRecord] = []
        for time_entry in time_entries:
            if not time_entry.has_project:
                logger.debug("Skipping time entry %d without project", time_entry.id)
                continue

            if time_entry.is_running:
                logger.debug("Skipping running time entry %d", time_entry.id)
                continue

            try:
                records.append(self._model_converter.to_time_record(time_entry))
            except TogglCsvError as exc:
                raise RepositoryError(f"Failed to convert time entry {time_entry.id}") from exc

        return records


def _label(record: TimeRecord) -> str:
    return (
        f"({record.start.isoformat()} - {record.stop.isoformat()}, "
        f"workspace {record.workspace_name!r}, project {record.project_name!r})"
    )
