"""Error taxonomy for togglcsv.

Every layer raises one of these and chains the underlying cause with
`raise ... from exc`, so the message says what was attempted and
`__cause__` says why it failed. Nothing here is retried.
"""

from __future__ import annotations


class TogglCsvError(Exception):
    """Base class for every error raised by the application."""


class TransportError(TogglCsvError):
    """The request never produced a usable HTTP response (network, DNS, TLS...)."""


class ApiStatusError(TransportError):
    """The Toggl API answered with a non-2xx status code."""

    def __init__(self, *, method: str, url: str, status_code: int, body: str) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"The {method} request against {url} failed ({status_code}): {body}")


class SerializationError(TogglCsvError):
    """A payload could not be encoded to, or decoded from, JSON."""


class NotFoundError(TogglCsvError):
    """A name or ID could not be resolved to an entity."""


class ValidationError(TogglCsvError, ValueError):
    """Input rejected before any remote call is made."""


class InvalidRangeError(ValidationError):
    """A date range whose start is not strictly before its end."""


class RecordValidationError(ValidationError):
    """A tabular row that cannot become a time record."""


class UnsupportedOperationError(TogglCsvError):
    """The remote service does not offer this operation."""


class RepositoryError(TogglCsvError):
    """A repository step failed; the cause carries the original error."""


class TransferError(TogglCsvError):
    """An import or export run was aborted."""


def describe(exc: BaseException) -> str:
    """Flatten an exception and its `__cause__` chain into one line."""

    parts: list[str] = []
    current: BaseException | None = exc
    while current is not None:
        text = str(current) or current.__class__.__name__
        parts.append(text)
        current = current.__cause__
    return ": ".join(parts)
