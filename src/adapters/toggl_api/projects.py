"""Toggl projects endpoint."""

from __future__ import annotations

from adapters.toggl_api.codec import decode_data, decode_list, encode
from core.domain.wire import ProjectModel
from core.errors import TransportError
from core.interfaces.toggl_api import RESTRequester


class ProjectEndpoint:
    def __init__(self, rest_client: RESTRequester) -> None:
        self._rest_client = rest_client

    def create_project(self, project: ProjectModel) -> ProjectModel:
        body = encode(
            {"project": project.model_dump(by_alias=True, exclude={"id"})},
            what="project",
        )
        try:
            content = self._rest_client.request("POST", "projects", body)
        except TransportError as exc:
            raise TransportError(f"Failed to create project {project.name!r}") from exc
        return decode_data(content, ProjectModel, what="created project")

    def get_projects(self, workspace_id: int) -> list[ProjectModel]:
        try:
            content = self._rest_client.request("GET", f"workspaces/{workspace_id}/projects")
        except TransportError as exc:
            raise TransportError(f"Failed to retrieve projects of workspace {workspace_id}") from exc
        return decode_list(content, ProjectModel, what="projects")
