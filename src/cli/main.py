"""Typer entrypoint: `togglcsv export` / `togglcsv import`."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.csv_mapper import CsvTimeRecordMapper
from adapters.toggl_api import build_toggl_api
from cli import doctor
from cli.ui_components import ImportProgress
from core.config import AppSettings
from core.errors import TogglCsvError, describe
from core.logger import setup_logger
from core.services.factory import build_repositories
from core.services.transfer import CsvExporter, CsvImporter

APP_NAME = "togglcsv"
APP_VERSION = "1.0.0"
EXPORT_DATE_FORMAT = "%Y-%m-%d"

app = typer.Typer(
    name=APP_NAME,
    no_args_is_help=True,
    help="Toggl ⥃ CSV: CSV-based import/export utility for Toggl time tracking data.",
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise typer.BadParameter(f"Invalid TOGGL_CSV_* configuration ({problems})") from exc
    setup_logger(level="DEBUG" if verbose else settings.log_level)


def _resolve_token(token: str | None, settings: AppSettings) -> str:
    resolved = (token or settings.api_token or "").strip()
    if not resolved:
        raise typer.BadParameter(
            "A Toggl API token is required (--token or TOGGL_CSV_API_TOKEN).",
            param_hint="--token",
        )
    return resolved


def _parse_day(value: str, *, label: str) -> datetime:
    try:
        parsed = datetime.strptime(value, EXPORT_DATE_FORMAT)
    except ValueError as exc:
        raise typer.BadParameter(f"Failed to parse the given {label} {value!r} (expected YYYY-MM-DD)") from exc
    return parsed.replace(tzinfo=timezone.utc)


def _end_of_today() -> datetime:
    now = datetime.now(timezone.utc)
    return datetime(now.year, now.month, now.day, 23, 59, 59, tzinfo=timezone.utc)


def _fail(exc: TogglCsvError) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {describe(exc)}", highlight=False, markup=True)
    return typer.Exit(code=1)


@app.command("export")
def export_command(
    start_date: str = typer.Argument(..., help='The start date (e.g. "2006-01-26").'),
    end_date: Optional[str] = typer.Argument(None, help="The end date (default: today)."),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Toggl API token of the source account."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the CSV to a file instead of stdout."),
) -> None:
    """Export your Toggl time tracking records as CSV."""

    settings = AppSettings()
    api_token = _resolve_token(token, settings)
    start = _parse_day(start_date, label="start date")
    end = _parse_day(end_date, label="end date") if end_date else _end_of_today()

    api = build_toggl_api(api_token, settings)
    try:
        repositories = build_repositories(api)
        exporter = CsvExporter(CsvTimeRecordMapper(), repositories.time_records)
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            with output.open("w", encoding="utf-8", newline="") as handle:
                exporter.export(start, end, handle)
        else:
            exporter.export(start, end, typer.get_text_stream("stdout"))
    except TogglCsvError as exc:
        raise _fail(exc) from exc
    finally:
        api.close()


@app.command("import")
def import_command(
    input_file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="CSV file to import (default: stdin).",
    ),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Toggl API token of the target account."),
    no_progress: bool = typer.Option(False, "--no-progress", help="Do not show the progress bar."),
) -> None:
    """Import CSV-based time tracking records into Toggl."""

    settings = AppSettings()
    api_token = _resolve_token(token, settings)

    progress = None if no_progress else ImportProgress(_err_console)
    api = build_toggl_api(api_token, settings)
    try:
        repositories = build_repositories(api)
        importer = CsvImporter(
            CsvTimeRecordMapper(),
            repositories.time_records,
            hooks=progress.hooks() if progress is not None else None,
        )
        if input_file is not None:
            with input_file.open("r", encoding="utf-8", newline="") as handle:
                result = importer.import_records(handle)
        else:
            result = importer.import_records(typer.get_text_stream("stdin"))
    except TogglCsvError as exc:
        raise _fail(exc) from exc
    finally:
        if progress is not None:
            progress.stop()
        api.close()

    _err_console.print(f"[green]Imported {result.count} time record(s).[/green]")


def run() -> None:
    # Windows consoles default to cp1252; descriptions and the help text are not.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    app(prog_name=APP_NAME)
