"""CLI: export/import/doctor through Typer's CliRunner."""

from __future__ import annotations

from functools import partial

import pytest
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main
from conftest import utc
from core.config import AppSettings
from core.domain.wire import TimeEntry
from core.errors import TransportError

HEADER = "Start,Stop,Workspace Name,Project Name,Client Name,Tag(s),Description\n"
ROW = "2016-08-02T09:00:00+00:00,2016-08-02T10:00:00+00:00,Company,Website,ACME,x,Landing page\n"

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """No .env files and no token from the developer's environment."""

    monkeypatch.delenv("TOGGL_CSV_API_TOKEN", raising=False)
    isolated = partial(AppSettings, _env_file=None)
    monkeypatch.setattr(cli_main, "AppSettings", isolated)
    monkeypatch.setattr(doctor, "AppSettings", isolated)


@pytest.fixture
def used_tokens(monkeypatch, fake_api) -> list[str]:
    tokens: list[str] = []

    def fake_build(api_token, settings=None, **_):
        tokens.append(api_token)
        return fake_api

    monkeypatch.setattr(cli_main, "build_toggl_api", fake_build)
    monkeypatch.setattr(doctor, "build_toggl_api", fake_build)
    return tokens


def test_version():
    result = runner.invoke(cli_main.app, ["--version"])

    assert result.exit_code == 0
    assert "togglcsv 1.0.0" in result.output


def test_invalid_configuration_is_a_usage_error(monkeypatch, used_tokens):
    monkeypatch.setenv("TOGGL_CSV_REQUEST_INTERVAL_SECONDS", "-1")

    result = runner.invoke(cli_main.app, ["export", "2016-08-01", "-t", "secret"])

    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
    assert "Traceback" not in result.output
    assert used_tokens == []


def test_no_arguments_shows_help():
    result = runner.invoke(cli_main.app, [])

    assert "export" in result.output
    assert "import" in result.output


# =============================================================================
# export
# =============================================================================


def test_export_writes_csv_to_stdout(fake_api, used_tokens):
    fake_api.time_entries = [
        TimeEntry(
            id=1,
            workspace_id=1,
            project_id=100,
            start=utc(2016, 8, 2, 9),
            stop=utc(2016, 8, 2, 10),
            description="Landing page",
            tags=["x"],
        )
    ]

    result = runner.invoke(cli_main.app, ["export", "2016-08-01", "2016-08-12", "--token", "secret"])

    assert result.exit_code == 0, result.output
    assert result.stdout == HEADER + ROW
    assert used_tokens == ["secret"]
    assert fake_api.closed is True


def test_export_end_date_is_inclusive(fake_api, used_tokens):
    runner.invoke(cli_main.app, ["export", "2016-07-12", "2016-08-12", "-t", "secret"])

    assert fake_api.requested_ranges[-1][1] == utc(2016, 8, 12, 23, 59, 59)


def test_export_token_from_environment(monkeypatch, used_tokens):
    monkeypatch.setenv("TOGGL_CSV_API_TOKEN", "from-env")

    result = runner.invoke(cli_main.app, ["export", "2016-08-01", "2016-08-12"])

    assert result.exit_code == 0, result.output
    assert used_tokens == ["from-env"]


def test_export_to_file(tmp_path, used_tokens):
    target = tmp_path / "out" / "records.csv"

    result = runner.invoke(cli_main.app, ["export", "2016-08-01", "2016-08-12", "-t", "secret", "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == HEADER


def test_export_without_token_is_a_usage_error(used_tokens):
    result = runner.invoke(cli_main.app, ["export", "2016-08-01"])

    assert result.exit_code == 2
    assert used_tokens == []


def test_export_bad_start_date(used_tokens):
    result = runner.invoke(cli_main.app, ["export", "01.08.2016", "-t", "secret"])

    assert result.exit_code == 2
    assert used_tokens == []


def test_export_api_failure_exits_with_one(fake_api, used_tokens):
    fake_api.errors["get_time_entries"] = TransportError("boom")

    result = runner.invoke(cli_main.app, ["export", "2016-08-01", "2016-08-12", "-t", "secret"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert fake_api.closed is True


# =============================================================================
# import
# =============================================================================


def test_import_from_file(tmp_path, fake_api, used_tokens):
    source = tmp_path / "records.csv"
    source.write_text(HEADER + ROW, encoding="utf-8")

    result = runner.invoke(cli_main.app, ["import", str(source), "-t", "secret", "--no-progress"])

    assert result.exit_code == 0, result.output
    assert "Imported 1 time record(s)" in result.output
    (created,) = fake_api.created_time_entries
    assert created.project_id == 100
    assert created.tags == ["x"]


def test_import_from_stdin_with_progress(fake_api, used_tokens):
    result = runner.invoke(cli_main.app, ["import", "-t", "secret"], input=HEADER + ROW + ROW)

    assert result.exit_code == 0, result.output
    assert len(fake_api.created_time_entries) == 2


def test_import_missing_file(tmp_path, used_tokens):
    result = runner.invoke(cli_main.app, ["import", str(tmp_path / "missing.csv"), "-t", "secret"])

    assert result.exit_code == 2
    assert used_tokens == []


def test_import_failure_exits_with_one(fake_api, used_tokens):
    fake_api.errors["create_time_entry"] = TransportError("boom")

    result = runner.invoke(cli_main.app, ["import", "-t", "secret", "--no-progress"], input=HEADER + ROW)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert fake_api.closed is True


# =============================================================================
# doctor
# =============================================================================


def test_doctor_run_ok(monkeypatch, used_tokens):
    monkeypatch.setenv("TOGGL_CSV_API_TOKEN", "secret")

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert used_tokens == ["secret"]


def test_doctor_run_without_token_fails(used_tokens):
    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert used_tokens == []


def test_doctor_run_api_failure(monkeypatch, fake_api, used_tokens):
    monkeypatch.setenv("TOGGL_CSV_API_TOKEN", "secret")
    fake_api.errors["get_workspaces"] = TransportError("boom")

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1


def test_doctor_setup_token_writes_user_env(monkeypatch, tmp_path):
    env_path = tmp_path / "togglcsv" / ".env"
    monkeypatch.setattr(doctor, "get_user_env_file", lambda: env_path)

    result = runner.invoke(cli_main.app, ["doctor", "setup-token"], input="secret\n")

    assert result.exit_code == 0, result.output
    assert "TOGGL_CSV_API_TOKEN=secret" in env_path.read_text(encoding="utf-8")
