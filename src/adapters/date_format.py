"""ISO 8601 dates as Toggl and the CSV files use them.

Format: `2006-01-02T15:04:05+07:00` (second precision, numeric UTC offset).
Parsing accepts exactly that shape, so whatever `format_date` writes can be
read back and nothing else can.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from core.errors import RecordValidationError

ISO8601_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}")


def format_date(value: datetime) -> str:
    """Format `value`; naive datetimes are taken as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


def parse_date(text: str) -> datetime:
    """Parse an ISO 8601 date with a `+HH:MM` / `-HH:MM` UTC offset.

    Raises:
        RecordValidationError: `text` is not in the expected format.
    """

    candidate = text.strip()
    if not ISO8601_PATTERN.fullmatch(candidate):
        raise RecordValidationError(f"{text!r} is not an ISO 8601 date with UTC offset")

    try:
        return datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise RecordValidationError(f"{text!r} is not a valid calendar date") from exc
