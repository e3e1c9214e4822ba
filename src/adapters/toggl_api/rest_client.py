"""Paced REST client: the only way out to the Toggl API.

Toggl bans clients that go above roughly one request per second, so every
call waits until `interval_seconds` have passed since the previous call
finished. The pacing state is a plain attribute: one caller at a time.
"""

from __future__ import annotations

import time
from typing import Callable

import httpx

from core.errors import ApiStatusError, TransportError
from core.logger import get_logger

logger = get_logger(__name__)


class PacedRESTClient:
    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        *,
        interval_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._interval_seconds = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._last_request_at: float | None = None

    def request(self, method: str, route: str, payload: bytes | None = None) -> bytes:
        """Send `method` to `<base_url>/<route>` and return the response body.

        Raises:
            TransportError: the request could not be sent or read.
            ApiStatusError: the API answered with a non-2xx status.
        """

        self._wait_for_slot()
        try:
            return self._send(method, route, payload)
        finally:
            self._last_request_at = self._clock()

    def close(self) -> None:
        self._client.close()

    def _wait_for_slot(self) -> None:
        if self._last_request_at is None:
            return
        elapsed = self._clock() - self._last_request_at
        if elapsed < self._interval_seconds:
            wait = self._interval_seconds - elapsed
            logger.debug("Pacing: waiting %.3fs before the next request", wait)
            self._sleep(wait)

    def _send(self, method: str, route: str, payload: bytes | None) -> bytes:
        url = f"{self._base_url}/{route.lstrip('/')}"
        logger.debug("%s %s", method, url)

        try:
            response = self._client.request(method, url, content=payload)
        except httpx.HTTPError as exc:
            raise TransportError(f"The {method} request against {url} failed") from exc

        if not response.is_success:
            raise ApiStatusError(
                method=method,
                url=url,
                status_code=response.status_code,
                body=response.text,
            )

        return response.content
