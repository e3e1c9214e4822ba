"""Toggl time entries endpoint."""

from __future__ import annotations

from datetime import datetime
from urllib.parse import quote

from adapters.date_format import format_date
from adapters.toggl_api.codec import decode_data, decode_list, encode
from core.domain.wire import TimeEntry
from core.errors import TransportError
from core.interfaces.toggl_api import RESTRequester


class TimeEntryEndpoint:
    def __init__(self, rest_client: RESTRequester, *, created_with: str = "togglcsv") -> None:
        self._rest_client = rest_client
        self._created_with = created_with

    def create_time_entry(self, time_entry: TimeEntry) -> TimeEntry:
        """Create a finished entry; Toggl derives `stop` from start + duration."""

        fields = {
            "wid": time_entry.workspace_id,
            "pid": time_entry.project_id,
            "start": format_date(time_entry.start),
            "duration": time_entry.duration_seconds(),
            "billable": time_entry.billable,
            "description": time_entry.description,
            "tags": list(time_entry.tags),
            "created_with": self._created_with,
        }
        body = encode({"time_entry": fields}, what="time entry")

        try:
            content = self._rest_client.request("POST", "time_entries", body)
        except TransportError as exc:
            raise TransportError("Failed to create time entry") from exc
        return decode_data(content, TimeEntry, what="created time entry")

    def get_time_entries(self, start: datetime, end: datetime) -> list[TimeEntry]:
        route = (
            "time_entries"
            f"?start_date={quote(format_date(start), safe='')}"
            f"&end_date={quote(format_date(end), safe='')}"
        )
        try:
            content = self._rest_client.request("GET", route)
        except TransportError as exc:
            raise TransportError(
                f"Failed to retrieve time entries (Start: {format_date(start)}, Stop: {format_date(end)})"
            ) from exc
        return decode_list(content, TimeEntry, what="time entries")
