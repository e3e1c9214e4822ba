"""Wire models: the ID-keyed JSON shapes spoken by the Toggl API.

Attribute names are readable (`workspace_id`, `project_id`); the short JSON
keys (`wid`, `pid`, `cid`) are aliases. Toggl omits or nulls optional
references, so those are normalized here once instead of in every caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _zero_if_missing(value: Any) -> Any:
    return 0 if value is None else value


class WorkspaceModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: str


class ClientModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = 0
    workspace_id: int = Field(default=0, alias="wid")
    name: str
    notes: str = ""

    @field_validator("id", "workspace_id", mode="before")
    @classmethod
    def _ids(cls, value: Any) -> Any:
        return _zero_if_missing(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _notes(cls, value: Any) -> Any:
        return "" if value is None else value


class ProjectModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = 0
    workspace_id: int = Field(default=0, alias="wid")
    client_id: int = Field(default=0, alias="cid")
    name: str

    @field_validator("id", "workspace_id", "client_id", mode="before")
    @classmethod
    def _ids(cls, value: Any) -> Any:
        return _zero_if_missing(value)


class TimeEntry(BaseModel):
    """One tracked time span as Toggl stores it.

    `project_id == 0` means "no project"; `stop is None` means the entry is
    still running.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = 0
    workspace_id: int = Field(default=0, alias="wid")
    project_id: int = Field(default=0, alias="pid")
    start: datetime
    stop: datetime | None = None
    billable: bool = False
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    duration: int | None = None
    created_with: str | None = None

    @field_validator("id", "workspace_id", "project_id", mode="before")
    @classmethod
    def _ids(cls, value: Any) -> Any:
        return _zero_if_missing(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_project(self) -> bool:
        return self.project_id != 0

    @property
    def is_running(self) -> bool:
        return self.stop is None

    def duration_seconds(self) -> int:
        """Whole seconds between start and stop (0 for running entries)."""

        if self.stop is None:
            return 0
        return int((self.stop - self.start).total_seconds())
