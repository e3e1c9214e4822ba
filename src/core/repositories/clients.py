"""Client repository."""

from __future__ import annotations

from core.domain.models import Client
from core.domain.wire import ClientModel
from core.errors import NotFoundError, RepositoryError, TogglCsvError
from core.interfaces.repositories import WorkspaceProvider
from core.interfaces.toggl_api import ClientAPI
from core.logger import get_logger

logger = get_logger(__name__)


class ClientRepository:
    """Read/write access to Toggl clients.

    Every client is resolved to its `Workspace` when the list is fetched; a
    single unknown workspace ID fails the whole fetch and nothing is cached.
    """

    def __init__(self, client_api: ClientAPI, workspaces: WorkspaceProvider) -> None:
        self._client_api = client_api
        self._workspaces = workspaces
        self._cache: list[Client] | None = None

    def create_client(self, workspace_id: int, name: str) -> Client:
        try:
            workspace = self._workspaces.get_workspace_by_id(workspace_id)
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to get workspace with id {workspace_id}") from exc

        try:
            created = self._client_api.create_client(ClientModel(name=name, workspace_id=workspace.id))
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to create client {name!r}") from exc

        self._cache = None
        logger.info("Created client %r in workspace %r", created.name, workspace.name)

        return Client(id=created.id, name=created.name, workspace=workspace)

    def get_clients(self) -> list[Client]:
        if self._cache is not None:
            return list(self._cache)

        try:
            client_models = self._client_api.get_clients()
        except TogglCsvError as exc:
            raise RepositoryError("Failed to get clients from Toggl") from exc

        clients: list[Client] = []
        for model in client_models:
            try:
                workspace = self._workspaces.get_workspace_by_id(model.workspace_id)
            except TogglCsvError as exc:
                raise RepositoryError(f"Failed to get workspace for client {model.id}") from exc
            clients.append(Client(id=model.id, name=model.name, workspace=workspace))

        self._cache = clients
        logger.debug("Cached %d clients", len(clients))
        return list(clients)

    def get_client_by_id(self, client_id: int) -> Client:
        for client in self.get_clients():
            if client.id == client_id:
                return client

        raise NotFoundError(f"No client found with id {client_id}")

    def get_client_by_name(self, workspace_name: str, client_name: str) -> Client:
        for client in self.get_clients():
            if client.workspace.name == workspace_name and client.name == client_name:
                return client

        raise NotFoundError(f"Client {client_name!r} was not found (Workspace: {workspace_name!r})")
