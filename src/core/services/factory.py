"""Wiring of repositories for one CLI invocation.

Every repository is constructed here once and handed to its dependents;
there is no module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.interfaces.toggl_api import TogglBackend
from core.repositories import (
    ClientRepository,
    ProjectRepository,
    TimeRecordRepository,
    WorkspaceRepository,
)


@dataclass
class Repositories:
    workspaces: WorkspaceRepository
    clients: ClientRepository
    projects: ProjectRepository
    time_records: TimeRecordRepository


def build_repositories(api: TogglBackend) -> Repositories:
    workspaces = WorkspaceRepository(api)
    clients = ClientRepository(api, workspaces)
    projects = ProjectRepository(api, workspaces, clients)
    time_records = TimeRecordRepository(api, workspaces, projects, clients)
    return Repositories(
        workspaces=workspaces,
        clients=clients,
        projects=projects,
        time_records=time_records,
    )
