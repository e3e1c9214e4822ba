"""Toggl clients endpoint."""

from __future__ import annotations

from adapters.toggl_api.codec import decode_data, decode_list, encode
from core.domain.wire import ClientModel
from core.errors import TransportError
from core.interfaces.toggl_api import RESTRequester


class ClientEndpoint:
    def __init__(self, rest_client: RESTRequester) -> None:
        self._rest_client = rest_client

    def create_client(self, client: ClientModel) -> ClientModel:
        body = encode(
            {"client": client.model_dump(by_alias=True, exclude={"id"})},
            what="client",
        )
        try:
            content = self._rest_client.request("POST", "clients", body)
        except TransportError as exc:
            raise TransportError(f"Failed to create client {client.name!r}") from exc
        return decode_data(content, ClientModel, what="created client")

    def get_clients(self) -> list[ClientModel]:
        try:
            content = self._rest_client.request("GET", "clients")
        except TransportError as exc:
            raise TransportError("Failed to retrieve clients") from exc
        return decode_list(content, ClientModel, what="clients")
