"""Workspace repository (read-only: Toggl cannot create workspaces via API)."""

from __future__ import annotations

from core.domain.models import Workspace
from core.errors import NotFoundError, RepositoryError, TogglCsvError, UnsupportedOperationError
from core.interfaces.toggl_api import WorkspaceAPI
from core.logger import get_logger

logger = get_logger(__name__)


class WorkspaceRepository:
    """Name/ID lookups over every workspace of the account.

    The first read fetches the whole list; later reads are served from the
    cache for the lifetime of the instance.
    """

    def __init__(self, workspace_api: WorkspaceAPI) -> None:
        self._workspace_api = workspace_api
        self._cache: list[Workspace] | None = None

    def create_workspace(self, name: str) -> Workspace:
        raise UnsupportedOperationError(
            "Creating workspaces is not supported by the Toggl API. "
            f"You must create the workspace {name!r} from the Toggl website."
        )

    def get_workspaces(self) -> list[Workspace]:
        if self._cache is not None:
            return list(self._cache)

        try:
            workspaces = self._workspace_api.get_workspaces()
        except TogglCsvError as exc:
            raise RepositoryError("Failed to get workspaces from Toggl") from exc

        self._cache = [Workspace(id=w.id, name=w.name) for w in workspaces]
        logger.debug("Cached %d workspaces", len(self._cache))
        return list(self._cache)

    def get_workspace_by_id(self, workspace_id: int) -> Workspace:
        for workspace in self.get_workspaces():
            if workspace.id == workspace_id:
                return workspace

        raise NotFoundError(f"No workspace found with id {workspace_id}")

    def get_workspace_by_name(self, workspace_name: str) -> Workspace:
        for workspace in self.get_workspaces():
            if workspace.name == workspace_name:
                return workspace

        raise NotFoundError(f"Workspace {workspace_name!r} was not found")
