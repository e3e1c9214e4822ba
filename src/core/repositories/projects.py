"""Project repository.

Creating a project may create its client first: a CSV row names its client
and the import must not require it to exist beforehand.
"""

from __future__ import annotations

from core.domain.models import Client, Project
from core.domain.wire import ProjectModel
from core.errors import NotFoundError, RepositoryError, TogglCsvError
from core.interfaces.repositories import ClientProvider, WorkspaceProvider
from core.interfaces.toggl_api import ProjectAPI
from core.logger import get_logger

logger = get_logger(__name__)


class ProjectRepository:
    """Read/write access to Toggl projects across all workspaces."""

    def __init__(
        self,
        project_api: ProjectAPI,
        workspaces: WorkspaceProvider,
        clients: ClientProvider,
    ) -> None:
        self._project_api = project_api
        self._workspaces = workspaces
        self._clients = clients
        self._cache: list[Project] | None = None

    def create_project(self, project_name: str, workspace_name: str, client_name: str) -> Project:
        """Create `project_name` in `workspace_name`.

        An empty `client_name` creates a project without client. A non-empty
        one is looked up and created when it does not exist yet.
        """

        try:
            workspace = self._workspaces.get_workspace_by_name(workspace_name)
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to get workspace {workspace_name!r}") from exc

        client: Client | None = None
        if client_name:
            client = self._get_or_create_client(workspace.id, workspace_name, client_name)

        try:
            created = self._project_api.create_project(
                ProjectModel(
                    name=project_name,
                    workspace_id=workspace.id,
                    client_id=client.id if client is not None else 0,
                )
            )
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to create project {project_name!r}") from exc

        self._cache = None
        logger.info(
            "Created project %r (workspace %r, client %r)", created.name, workspace.name, client_name
        )

        return Project(id=created.id, name=created.name, workspace=workspace, client=client)

    def _get_or_create_client(self, workspace_id: int, workspace_name: str, client_name: str) -> Client:
        try:
            return self._clients.get_client_by_name(workspace_name, client_name)
        except NotFoundError:
            pass

        try:
            return self._clients.create_client(workspace_id, client_name)
        except TogglCsvError as exc:
            raise RepositoryError(f"Failed to create client {client_name!r}") from exc

    def get_projects(self) -> list[Project]:
        if self._cache is not None:
            return list(self._cache)

        try:
            workspaces = self._workspaces.get_workspaces()
        except TogglCsvError as exc:
            raise RepositoryError("Failed to retrieve workspaces") from exc

        projects: list[Project] = []
        for workspace in workspaces:
            try:
                project_models = self._project_api.get_projects(workspace.id)
            except TogglCsvError as exc:
                raise RepositoryError(
                    f"Failed to get projects of workspace {workspace.name!r} from Toggl"
                ) from exc

            for model in project_models:
                client: Client | None = None
                if model.client_id != 0:
                    try:
                        client = self._clients.get_client_by_id(model.client_id)
                    except TogglCsvError as exc:
                        raise RepositoryError(f"Failed to get client {model.client_id}") from exc

                projects.append(Project(id=model.id, name=model.name, workspace=workspace, client=client))

        self._cache = projects
        logger.debug("Cached %d projects from %d workspaces", len(projects), len(workspaces))
        return list(projects)

    def get_project_by_id(self, project_id: int) -> Project:
        for project in self.get_projects():
            if project.id == project_id:
                return project

        raise NotFoundError(f"No project found with id {project_id}")

    def get_project_by_name(self, project_name: str, workspace_name: str, client_name: str) -> Project:
        for project in self.get_projects():
            if (
                project.name == project_name
                and project.workspace.name == workspace_name
                and project.client_name == client_name
            ):
                return project

        raise NotFoundError(
            f"Project {project_name!r} was not found (Workspace: {workspace_name!r}, Client: {client_name!r})"
        )
