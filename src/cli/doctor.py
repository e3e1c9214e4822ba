"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.toggl_api import build_toggl_api
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import TogglCsvError, describe
from core.repositories import WorkspaceRepository

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console(stderr=True)


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """List the workspaces once to prove token and connectivity."""

    if not settings.api_token:
        return False, "No token configured"

    api = build_toggl_api(settings.api_token, settings)
    try:
        workspaces = WorkspaceRepository(api).get_workspaces()
    except TogglCsvError as exc:
        return False, describe(exc)
    finally:
        api.close()

    names = ", ".join(w.name for w in workspaces) or "-"
    return True, f"{len(workspaces)} workspace(s): {names}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="togglcsv Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.api_token:
        table.add_row("API token", "OK", "Configured")
    else:
        table.add_row("API token", "MISSING", "Pass --token or run `togglcsv doctor setup-token`")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Request pacing", "OK", f"{settings.request_interval_seconds:.2f}s between requests")

    # Connectivity
    ok_api, detail_api = _check_api(settings)
    table.add_row("Toggl API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive token setup (stores config in the user config .env)."""

    api_token = typer.prompt("Toggl API token", hide_input=True, confirmation_prompt=False).strip()
    if not api_token:
        raise typer.BadParameter("the API token is required")

    env_path = write_user_env_vars({"TOGGL_CSV_API_TOKEN": api_token}, env_path=get_user_env_file())
    _console.print(f"[green]Saved Toggl token to:[/green] {env_path}")
