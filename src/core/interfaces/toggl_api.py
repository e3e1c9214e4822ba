"""Contratos de la API de Toggl (lado wire).

Por qué Protocol:
- Los repositorios del Core solo necesitan "listar/crear" entidades; no les
  importa si detrás hay httpx, un fake en memoria o un mock.
- Cada endpoint es un contrato pequeño, así un repositorio depende solo de
  lo que usa (el de clientes no ve time entries).
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from core.domain.wire import ClientModel, ProjectModel, TimeEntry, WorkspaceModel


@runtime_checkable
class RESTRequester(Protocol):
    """Envía un request HTTP a la API y devuelve el cuerpo de la respuesta."""

    def request(self, method: str, route: str, payload: bytes | None = None) -> bytes:
        ...


@runtime_checkable
class WorkspaceAPI(Protocol):
    def get_workspaces(self) -> list[WorkspaceModel]:
        ...


@runtime_checkable
class ClientAPI(Protocol):
    def create_client(self, client: ClientModel) -> ClientModel:
        ...

    def get_clients(self) -> list[ClientModel]:
        ...


@runtime_checkable
class ProjectAPI(Protocol):
    def create_project(self, project: ProjectModel) -> ProjectModel:
        ...

    def get_projects(self, workspace_id: int) -> list[ProjectModel]:
        ...


@runtime_checkable
class TimeEntryAPI(Protocol):
    def create_time_entry(self, time_entry: TimeEntry) -> TimeEntry:
        ...

    def get_time_entries(self, start: datetime, end: datetime) -> list[TimeEntry]:
        ...


@runtime_checkable
class TogglBackend(WorkspaceAPI, ClientAPI, ProjectAPI, TimeEntryAPI, Protocol):
    """Todos los endpoints juntos (lo que recibe el cableado de repositorios)."""
