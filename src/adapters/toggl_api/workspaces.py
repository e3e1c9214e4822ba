"""Toggl workspaces endpoint (list only)."""

from __future__ import annotations

from adapters.toggl_api.codec import decode_list
from core.domain.wire import WorkspaceModel
from core.errors import TransportError
from core.interfaces.toggl_api import RESTRequester


class WorkspaceEndpoint:
    def __init__(self, rest_client: RESTRequester) -> None:
        self._rest_client = rest_client

    def get_workspaces(self) -> list[WorkspaceModel]:
        try:
            content = self._rest_client.request("GET", "workspaces")
        except TransportError as exc:
            raise TransportError("Failed to retrieve workspaces") from exc
        return decode_list(content, WorkspaceModel, what="workspaces")
