"""Wrapper de httpx.

Responsabilidad:
- Estandariza timeouts y headers de las consultas al registro.
- Permite inyectar un `transport` (p.ej. `httpx.MockTransport` en tests).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.errors import RegistryError


def build_async_client(
    settings: AppSettings,
    *,
    auth: httpx.Auth | tuple[str, str] | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del proyecto.

    - Timeout explícito (`HTTP_TIMEOUT_SECONDS`).
    - `Accept: application/json`: ambos registros responden JSON.
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        auth=auth,
        transport=transport,
    )


def parse_json_object(response: httpx.Response, *, what: str) -> dict:
    """Decodifica el body como objeto JSON o eleva `RegistryError`."""

    try:
        payload = response.json()
    except ValueError as exc:
        raise RegistryError(f"{what}: invalid JSON body ({exc})", status_code=response.status_code) from exc
    if not isinstance(payload, dict):
        raise RegistryError(
            f"{what}: expected a JSON object, got {type(payload).__name__}",
            status_code=response.status_code,
        )
    return payload
