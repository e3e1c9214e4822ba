"""Fixtures compartidos: una API de Toggl en memoria."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.domain.wire import ClientModel, ProjectModel, TimeEntry, WorkspaceModel
from core.repositories import ClientRepository, ProjectRepository, TimeRecordRepository, WorkspaceRepository


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


class FakeTogglAPI:
    """Implementa todos los contratos de `core.interfaces.toggl_api` en memoria.

    - `calls` registra cada llamada en orden.
    - `errors[nombre]` hace fallar la llamada con ese nombre.
    """

    def __init__(
        self,
        *,
        workspaces: list[WorkspaceModel] | None = None,
        clients: list[ClientModel] | None = None,
        projects: list[ProjectModel] | None = None,
        time_entries: list[TimeEntry] | None = None,
    ) -> None:
        self.workspaces = list(workspaces or [])
        self.clients = list(clients or [])
        self.projects = list(projects or [])
        self.time_entries = list(time_entries or [])
        self.created_time_entries: list[TimeEntry] = []
        self.requested_ranges: list[tuple[datetime, datetime]] = []
        self.calls: list[str] = []
        self.errors: dict[str, Exception] = {}
        self.closed = False
        self._next_id = 1000

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.errors:
            raise self.errors[name]

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def count(self, name: str) -> int:
        return self.calls.count(name)

    def get_workspaces(self) -> list[WorkspaceModel]:
        self._record("get_workspaces")
        return list(self.workspaces)

    def get_clients(self) -> list[ClientModel]:
        self._record("get_clients")
        return list(self.clients)

    def create_client(self, client: ClientModel) -> ClientModel:
        self._record("create_client")
        created = client.model_copy(update={"id": self._new_id()})
        self.clients.append(created)
        return created

    def get_projects(self, workspace_id: int) -> list[ProjectModel]:
        self._record("get_projects")
        return [p for p in self.projects if p.workspace_id == workspace_id]

    def create_project(self, project: ProjectModel) -> ProjectModel:
        self._record("create_project")
        created = project.model_copy(update={"id": self._new_id()})
        self.projects.append(created)
        return created

    def get_time_entries(self, start: datetime, end: datetime) -> list[TimeEntry]:
        self._record("get_time_entries")
        self.requested_ranges.append((start, end))
        return [e for e in self.time_entries if start <= e.start <= end]

    def create_time_entry(self, time_entry: TimeEntry) -> TimeEntry:
        self._record("create_time_entry")
        created = time_entry.model_copy(update={"id": self._new_id()})
        self.created_time_entries.append(created)
        return created

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_api() -> FakeTogglAPI:
    """Cuenta con un workspace, un cliente y dos proyectos (uno sin cliente)."""

    return FakeTogglAPI(
        workspaces=[
            WorkspaceModel(id=1, name="Company"),
            WorkspaceModel(id=2, name="Side Business"),
        ],
        clients=[ClientModel(id=10, workspace_id=1, name="ACME")],
        projects=[
            ProjectModel(id=100, workspace_id=1, client_id=10, name="Website"),
            ProjectModel(id=101, workspace_id=1, client_id=0, name="Internal"),
        ],
    )


@pytest.fixture
def workspaces(fake_api: FakeTogglAPI) -> WorkspaceRepository:
    return WorkspaceRepository(fake_api)


@pytest.fixture
def clients(fake_api: FakeTogglAPI, workspaces: WorkspaceRepository) -> ClientRepository:
    return ClientRepository(fake_api, workspaces)


@pytest.fixture
def projects(
    fake_api: FakeTogglAPI, workspaces: WorkspaceRepository, clients: ClientRepository
) -> ProjectRepository:
    return ProjectRepository(fake_api, workspaces, clients)


@pytest.fixture
def time_records(
    fake_api: FakeTogglAPI,
    workspaces: WorkspaceRepository,
    projects: ProjectRepository,
    clients: ClientRepository,
) -> TimeRecordRepository:
    return TimeRecordRepository(fake_api, workspaces, projects, clients)
