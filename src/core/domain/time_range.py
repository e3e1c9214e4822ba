"""Monthly time ranges for fetching time entries.

Toggl's time entry listing silently truncates long result sets (1000 entries
per request), so exports ask for at most one calendar month per call. The
provider below turns an arbitrary window into month-aligned chunks while
keeping the caller's first and last day.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timezone

from core.errors import InvalidRangeError


def assume_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC, like `adapters.date_format` does."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class TimeRange:
    """A `[start, stop]` window with `start` strictly before `stop`.

    Build it with `TimeRange.create`; the plain constructor does not validate.
    """

    start: datetime
    stop: datetime

    @classmethod
    def create(cls, start: datetime, stop: datetime) -> "TimeRange":
        start, stop = assume_utc(start), assume_utc(stop)
        if start > stop:
            raise InvalidRangeError(f"The start date ({start}) cannot be after the stop date ({stop})")
        if start == stop:
            raise InvalidRangeError(f"The start and stop date cannot be the same ({start})")
        return cls(start=start, stop=stop)


def _beginning_of_month(year: int, month: int) -> datetime:
    return datetime(year, month, 1, 0, 0, 0, tzinfo=timezone.utc)


def _end_of_month(year: int, month: int) -> datetime:
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, last_day, 23, 59, 59, tzinfo=timezone.utc)


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


class MonthlyTimeRangeProvider:
    """Splits a window into one `TimeRange` per calendar month it touches."""

    def get_time_ranges(self, start_date: datetime, end_date: datetime) -> list[TimeRange]:
        """Return the month chunks between `start_date` and `end_date` (inclusive).

        - The first chunk starts on `start_date`'s day at 00:00:01 UTC.
        - The last chunk ends on `end_date`'s day at 23:59:59 UTC.
        - Every chunk in between covers its whole calendar month.

        Only the calendar day of the inputs matters: their clock time and UTC
        offset are dropped before the month walk.
        """

        if assume_utc(start_date) > assume_utc(end_date):
            raise InvalidRangeError(
                f"The start date ({start_date}) cannot be after the end date ({end_date})"
            )

        start = datetime(start_date.year, start_date.month, start_date.day, 0, 0, 1, tzinfo=timezone.utc)
        end = datetime(end_date.year, end_date.month, end_date.day, 23, 59, 59, tzinfo=timezone.utc)

        ranges: list[TimeRange] = []
        year, month = start.year, start.month
        while (year, month) <= (end.year, end.month):
            is_first = (year, month) == (start.year, start.month)
            is_last = (year, month) == (end.year, end.month)

            month_start = start if is_first else _beginning_of_month(year, month)
            month_end = end if is_last else _end_of_month(year, month)

            try:
                ranges.append(TimeRange.create(month_start, month_end))
            except InvalidRangeError as exc:
                raise InvalidRangeError(
                    f"Failed to calculate time ranges between {start_date} and {end_date}"
                ) from exc

            year, month = _next_month(year, month)

        return ranges
