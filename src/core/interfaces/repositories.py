"""Contratos de los repositorios del Core.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El conversor y el repositorio de time records solo *usan* los repositorios
  de entidades; nunca son dueños de sus caches.
- Los tests pueden sustituir cualquier repositorio por un stub simple.

Regla común: "no encontrado" siempre es `NotFoundError`, nunca un valor vacío.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from core.domain.models import Client, Project, TimeRecord, Workspace
from core.domain.time_range import TimeRange
from core.domain.wire import TimeEntry


@runtime_checkable
class WorkspaceProvider(Protocol):
    def create_workspace(self, name: str) -> Workspace:
        """Siempre falla: la API de Toggl no permite crear workspaces."""

        ...

    def get_workspaces(self) -> list[Workspace]:
        ...

    def get_workspace_by_id(self, workspace_id: int) -> Workspace:
        ...

    def get_workspace_by_name(self, workspace_name: str) -> Workspace:
        ...


@runtime_checkable
class ClientProvider(Protocol):
    def create_client(self, workspace_id: int, name: str) -> Client:
        ...

    def get_clients(self) -> list[Client]:
        ...

    def get_client_by_id(self, client_id: int) -> Client:
        ...

    def get_client_by_name(self, workspace_name: str, client_name: str) -> Client:
        ...


@runtime_checkable
class ProjectProvider(Protocol):
    def create_project(self, project_name: str, workspace_name: str, client_name: str) -> Project:
        """Crea el proyecto (y su cliente, si aún no existe)."""

        ...

    def get_projects(self) -> list[Project]:
        ...

    def get_project_by_id(self, project_id: int) -> Project:
        ...

    def get_project_by_name(self, project_name: str, workspace_name: str, client_name: str) -> Project:
        ...


@runtime_checkable
class ModelConverter(Protocol):
    def to_time_entry(self, record: TimeRecord) -> TimeEntry:
        ...

    def to_time_record(self, entry: TimeEntry) -> TimeRecord:
        ...


@runtime_checkable
class TimeRangeProvider(Protocol):
    def get_time_ranges(self, start_date: datetime, end_date: datetime) -> list[TimeRange]:
        ...


@runtime_checkable
class TimeRecordProvider(Protocol):
    def create_time_record(self, record: TimeRecord) -> None:
        ...

    def get_time_records(self, start: datetime, end: datetime) -> list[TimeRecord]:
        ...
