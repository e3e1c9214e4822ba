"""TimeRecord <-> TimeEntry conversion.

The entity repositories are the only authority for names and IDs; the
converter keeps no state of its own and never creates entities.
"""

from __future__ import annotations

from core.domain.models import Client, Project, TimeRecord
from core.domain.wire import TimeEntry
from core.errors import RepositoryError, TogglCsvError
from core.interfaces.repositories import ClientProvider, ProjectProvider, WorkspaceProvider


class TogglModelConverter:
    def __init__(
        self,
        workspaces: WorkspaceProvider,
        projects: ProjectProvider,
        clients: ClientProvider,
    ) -> None:
        self._workspaces = workspaces
        self._projects = projects
        self._clients = clients

    def to_time_entry(self, record: TimeRecord) -> TimeEntry:
        """Resolve the record's names to IDs."""

        try:
            workspace = self._workspaces.get_workspace_by_name(record.workspace_name)
        except TogglCsvError as exc:
            raise RepositoryError("Cannot convert time record to time entry") from exc

        try:
            project = self._projects.get_project_by_name(
                record.project_name, record.workspace_name, record.client_name
            )
        except TogglCsvError as exc:
            raise RepositoryError("Cannot convert time record to time entry") from exc

        return TimeEntry(
            workspace_id=workspace.id,
            project_id=project.id,
            start=record.start,
            stop=record.stop,
            description=record.description,
            tags=list(record.tags),
        )

    def to_time_record(self, entry: TimeEntry) -> TimeRecord:
        """Resolve the entry's IDs to names.

        An entry without project converts to a record with empty project and
        client names; callers decide whether to keep it.
        """

        if entry.stop is None:
            raise RepositoryError(f"Cannot convert running time entry {entry.id} to a time record")

        try:
            workspace = self._workspaces.get_workspace_by_id(entry.workspace_id)
        except TogglCsvError as exc:
            raise RepositoryError(f"No workspace found with ID {entry.workspace_id}") from exc

        project: Project | None = None
        client: Client | None = None
        if entry.project_id != 0:
            try:
                project = self._projects.get_project_by_id(entry.project_id)
            except TogglCsvError as exc:
                raise RepositoryError(f"No project found with ID {entry.project_id}") from exc

            if project.client is not None:
                try:
                    client = self._clients.get_client_by_id(project.client.id)
                except TogglCsvError as exc:
                    raise RepositoryError(f"No client found with ID {project.client.id}") from exc

        return TimeRecord(
            workspace_name=workspace.name,
            project_name=project.name if project is not None else "",
            client_name=client.name if client is not None else "",
            start=entry.start,
            stop=entry.stop,
            description=entry.description,
            tags=tuple(entry.tags),
        )
