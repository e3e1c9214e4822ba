"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y autenticación contra la API de Toggl.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

# Toggl: el token va como usuario de basic auth con este password fijo.
API_TOKEN_PASSWORD = "api_token"


def build_client(
    settings: AppSettings | None = None,
    *,
    api_token: str,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` autenticado con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los endpoints se comporten igual.
    - `transport` permite a los tests responder sin red.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    timeout = (
        httpx.Timeout(settings.http_timeout_seconds)
        if settings.http_timeout_seconds is not None
        else httpx.Timeout(5.0)
    )
    return httpx.Client(
        auth=httpx.BasicAuth(api_token, API_TOKEN_PASSWORD),
        timeout=timeout,
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
