"""Time record repository: chunked reads and create-on-demand writes."""

from __future__ import annotations

from datetime import datetime

import pytest

from conftest import FakeTogglAPI, utc
from core.domain.models import TimeRecord
from core.domain.time_range import TimeRange
from core.domain.wire import TimeEntry
from core.errors import InvalidRangeError, RepositoryError, TransportError
from core.repositories import (
    ClientRepository,
    ProjectRepository,
    TimeRecordRepository,
    WorkspaceRepository,
)


def _entry(entry_id: int, project_id: int, start, stop) -> TimeEntry:
    return TimeEntry(
        id=entry_id,
        workspace_id=1,
        project_id=project_id,
        start=start,
        stop=stop,
        description=f"entry {entry_id}",
        tags=["a", "b"],
    )


@pytest.fixture
def record() -> TimeRecord:
    return TimeRecord(
        start=utc(2016, 8, 1, 9),
        stop=utc(2016, 8, 1, 10),
        workspace_name="Company",
        project_name="Website",
        client_name="ACME",
        description="Landing page",
        tags=("design",),
    )


# =============================================================================
# get_time_records
# =============================================================================


def test_start_after_end_is_rejected_without_requests(fake_api, time_records):
    with pytest.raises(InvalidRangeError):
        time_records.get_time_records(utc(2016, 8, 1), utc(2016, 1, 1))

    assert fake_api.calls == []


def test_naive_dates_are_taken_as_utc(fake_api, time_records):
    time_records.get_time_records(datetime(2016, 8, 1), utc(2016, 8, 12))

    assert fake_api.requested_ranges == [(utc(2016, 8, 1, 0, 0, 1), utc(2016, 8, 12, 23, 59, 59))]


def test_naive_start_after_aware_end_is_rejected(fake_api, time_records):
    with pytest.raises(InvalidRangeError):
        time_records.get_time_records(datetime(2016, 9, 1), utc(2016, 8, 12))

    assert fake_api.calls == []


def test_one_request_per_month_in_order(fake_api, time_records):
    time_records.get_time_records(utc(2016, 1, 1), utc(2016, 8, 30))

    assert fake_api.count("get_time_entries") == 8
    starts = [start for start, _ in fake_api.requested_ranges]
    assert starts == sorted(starts)
    assert fake_api.requested_ranges[0][0] == utc(2016, 1, 1, 0, 0, 1)
    assert fake_api.requested_ranges[-1][1] == utc(2016, 8, 30, 23, 59, 59)


def test_no_entries_returns_empty_list(time_records):
    assert time_records.get_time_records(utc(2016, 8, 1), utc(2016, 8, 12)) == []


def test_entries_are_converted_in_chunk_order(fake_api, time_records):
    fake_api.time_entries = [
        _entry(3, 100, utc(2016, 8, 2, 9), utc(2016, 8, 2, 10)),
        _entry(1, 101, utc(2016, 7, 20, 9), utc(2016, 7, 20, 10)),
        _entry(2, 100, utc(2016, 7, 21, 9), utc(2016, 7, 21, 10)),
    ]

    records = time_records.get_time_records(utc(2016, 7, 12), utc(2016, 8, 12))

    assert [r.description for r in records] == ["entry 1", "entry 2", "entry 3"]
    assert records[0].project_name == "Internal"
    assert records[0].client_name == ""
    assert records[1].client_name == "ACME"
    assert records[2].tags == ("a", "b")


def test_running_entries_are_skipped(fake_api, time_records):
    fake_api.time_entries = [_entry(1, 100, utc(2016, 8, 2, 9), None)]

    assert time_records.get_time_records(utc(2016, 8, 1), utc(2016, 8, 12)) == []


def test_entries_without_project_are_skipped(fake_api, time_records):
    fake_api.time_entries = [_entry(1, 0, utc(2016, 8, 2, 9), utc(2016, 8, 2, 10))]

    assert time_records.get_time_records(utc(2016, 8, 1), utc(2016, 8, 12)) == []
    # skipped before conversion: no lookups at all
    assert "get_workspaces" not in fake_api.calls


def test_chunk_failure_aborts_the_whole_call(fake_api, time_records):
    fake_api.errors["get_time_entries"] = TransportError("boom")

    with pytest.raises(RepositoryError, match="Failed to retrieve time entries"):
        time_records.get_time_records(utc(2016, 7, 12), utc(2016, 8, 12))

    assert fake_api.count("get_time_entries") == 1


def test_conversion_failure_aborts_the_whole_call(fake_api, time_records):
    fake_api.time_entries = [
        _entry(1, 100, utc(2016, 8, 2, 9), utc(2016, 8, 2, 10)),
        _entry(2, 404, utc(2016, 8, 3, 9), utc(2016, 8, 3, 10)),
    ]

    with pytest.raises(RepositoryError, match="time entry 2"):
        time_records.get_time_records(utc(2016, 8, 1), utc(2016, 8, 12))


def test_custom_time_range_provider_is_used(fake_api, workspaces, projects, clients):
    class SingleRange:
        def get_time_ranges(self, start_date, end_date):
            return [TimeRange.create(start_date, end_date)]

    repository = TimeRecordRepository(
        fake_api, workspaces, projects, clients, time_range_provider=SingleRange()
    )
    repository.get_time_records(utc(2016, 1, 1), utc(2016, 8, 30))

    assert fake_api.requested_ranges == [(utc(2016, 1, 1), utc(2016, 8, 30))]


# =============================================================================
# create_time_record
# =============================================================================


def test_create_with_existing_project(fake_api, time_records, record):
    time_records.create_time_record(record)

    assert "create_project" not in fake_api.calls
    (created,) = fake_api.created_time_entries
    assert (created.workspace_id, created.project_id) == (1, 100)
    assert created.tags == ["design"]


def test_create_with_new_project_and_new_client_creates_in_order(fake_api, time_records, record):
    record = record.model_copy(update={"project_name": "Portal", "client_name": "Initech"})

    time_records.create_time_record(record)

    creations = [c for c in fake_api.calls if c.startswith("create_")]
    assert creations == ["create_client", "create_project", "create_time_entry"]
    new_project = fake_api.projects[-1]
    assert fake_api.created_time_entries[0].project_id == new_project.id


def test_create_with_new_project_without_client(fake_api, time_records, record):
    record = record.model_copy(update={"project_name": "Research", "client_name": ""})

    time_records.create_time_record(record)

    creations = [c for c in fake_api.calls if c.startswith("create_")]
    assert creations == ["create_project", "create_time_entry"]


def test_second_record_reuses_the_created_project(fake_api, time_records, record):
    record = record.model_copy(update={"project_name": "Portal"})

    time_records.create_time_record(record)
    time_records.create_time_record(record)

    assert fake_api.count("create_project") == 1
    assert fake_api.count("create_time_entry") == 2


def test_project_creation_failure_is_reported(fake_api, time_records, record):
    fake_api.errors["create_project"] = TransportError("boom")

    with pytest.raises(RepositoryError, match="Failed to create project"):
        time_records.create_time_record(record.model_copy(update={"project_name": "Portal"}))

    assert "create_time_entry" not in fake_api.calls


def test_lookup_failure_does_not_create_anything(fake_api, time_records, record):
    fake_api.errors["get_workspaces"] = TransportError("boom")

    with pytest.raises(RepositoryError, match="look up the project"):
        time_records.create_time_record(record)

    assert not [c for c in fake_api.calls if c.startswith("create_")]


def test_entry_creation_failure_keeps_the_created_project(fake_api, time_records, record):
    fake_api.errors["create_time_entry"] = TransportError("boom")

    with pytest.raises(RepositoryError, match="Failed to create time record"):
        time_records.create_time_record(record.model_copy(update={"project_name": "Portal"}))

    assert fake_api.projects[-1].name == "Portal"


def test_conversion_failure_is_reported(fake_api, workspaces, projects, clients, record):
    class BrokenConverter:
        def to_time_entry(self, record):
            raise RepositoryError("nope")

        def to_time_record(self, entry):
            raise AssertionError("not used")

    repository = TimeRecordRepository(
        fake_api, workspaces, projects, clients, model_converter=BrokenConverter()
    )

    with pytest.raises(RepositoryError, match="into a valid time entry"):
        repository.create_time_record(record)

    assert "create_time_entry" not in fake_api.calls


def test_unknown_workspace_fails_before_any_creation(record):
    api = FakeTogglAPI()
    workspaces = WorkspaceRepository(api)
    clients = ClientRepository(api, workspaces)
    projects = ProjectRepository(api, workspaces, clients)
    repository = TimeRecordRepository(api, workspaces, projects, clients)

    with pytest.raises(RepositoryError, match="Failed to create project"):
        repository.create_time_record(record)

    assert not [c for c in api.calls if c.startswith("create_")]
