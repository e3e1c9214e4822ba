"""Toggl API facade.

All endpoints share one `PacedRESTClient`, so the one-request-per-second
pacing holds across workspaces, clients, projects and time entries alike.
"""

from __future__ import annotations

from datetime import datetime

import httpx

from adapters.http_client import build_client
from adapters.toggl_api.clients import ClientEndpoint
from adapters.toggl_api.projects import ProjectEndpoint
from adapters.toggl_api.rest_client import PacedRESTClient
from adapters.toggl_api.time_entries import TimeEntryEndpoint
from adapters.toggl_api.workspaces import WorkspaceEndpoint
from core.config import AppSettings
from core.domain.wire import ClientModel, ProjectModel, TimeEntry, WorkspaceModel
from core.interfaces.toggl_api import RESTRequester


class TogglAPI:
    """Implements every `core.interfaces.toggl_api` contract."""

    def __init__(self, rest_client: RESTRequester, *, created_with: str = "togglcsv") -> None:
        self.rest_client = rest_client
        self._workspaces = WorkspaceEndpoint(rest_client)
        self._clients = ClientEndpoint(rest_client)
        self._projects = ProjectEndpoint(rest_client)
        self._time_entries = TimeEntryEndpoint(rest_client, created_with=created_with)

    def get_workspaces(self) -> list[WorkspaceModel]:
        return self._workspaces.get_workspaces()

    def create_client(self, client: ClientModel) -> ClientModel:
        return self._clients.create_client(client)

    def get_clients(self) -> list[ClientModel]:
        return self._clients.get_clients()

    def create_project(self, project: ProjectModel) -> ProjectModel:
        return self._projects.create_project(project)

    def get_projects(self, workspace_id: int) -> list[ProjectModel]:
        return self._projects.get_projects(workspace_id)

    def create_time_entry(self, time_entry: TimeEntry) -> TimeEntry:
        return self._time_entries.create_time_entry(time_entry)

    def get_time_entries(self, start: datetime, end: datetime) -> list[TimeEntry]:
        return self._time_entries.get_time_entries(start, end)

    def close(self) -> None:
        close = getattr(self.rest_client, "close", None)
        if callable(close):
            close()


def build_toggl_api(
    api_token: str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> TogglAPI:
    """Wire httpx -> paced client -> endpoints from the settings."""

    settings = settings or AppSettings()
    http_client = build_client(settings, api_token=api_token, transport=transport)
    rest_client = PacedRESTClient(
        http_client,
        settings.api_base_url,
        interval_seconds=settings.request_interval_seconds,
    )
    return TogglAPI(rest_client, created_with=settings.created_with)
