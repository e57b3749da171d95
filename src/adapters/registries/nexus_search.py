"""Registro: Sonatype Nexus (search API).

Implementación:
- `GET <source>/service/rest/v1/search?repository=..&name=..&version=..`
- Basic auth opcional (solo si hay usuario y contraseña).
- Los resultados vienen paginados con `continuationToken`.

El servidor puede devolver más items de los pedidos (filtros ignorados o
búsqueda por prefijo), así que solo cuenta un item con `name` y `version`
exactamente iguales a los consultados.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_async_client, parse_json_object
from core.config import AppSettings
from core.domain.errors import RegistryError
from core.domain.models import PackageIdentity
from core.interfaces.registry import RegistryClient


def item_matches(item: Any, identity: PackageIdentity) -> bool:
    if not isinstance(item, dict):
        return False
    return item.get("name") == identity.name and item.get("version") == identity.version


class NexusSearchRegistry(RegistryClient):
    _search_path = "/service/rest/v1/search"

    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_pages: int = 20,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._max_pages = max_pages

    @property
    def search_url(self) -> str:
        return f"{self._settings.registry_base_url}{self._search_path}"

    def _auth(self) -> httpx.BasicAuth | None:
        username = self._settings.nexus_username
        password = self._settings.nexus_password
        if not username or not password:
            return None
        return httpx.BasicAuth(username, password)

    async def check_exists(self, identity: PackageIdentity) -> bool:
        params: dict[str, str] = {
            "repository": self._settings.nexus_repository,
            "name": identity.name,
            "version": identity.version,
        }

        async with build_async_client(
            self._settings,
            auth=self._auth(),
            transport=self._transport,
        ) as client:
            for _ in range(self._max_pages):
                try:
                    response = await client.get(self.search_url, params=params)
                except httpx.HTTPError as exc:
                    raise RegistryError(f"GET {self.search_url} failed: {exc}") from exc

                if response.status_code == 404:
                    return False
                if response.status_code != 200:
                    raise RegistryError(
                        f"GET {self.search_url} returned HTTP {response.status_code}",
                        status_code=response.status_code,
                    )

                payload = parse_json_object(response, what=self.search_url)
                items = payload.get("items")
                if items is None:
                    items = []
                if not isinstance(items, list):
                    raise RegistryError(f"{self.search_url}: 'items' is not a list", status_code=200)

                if any(item_matches(item, identity) for item in items):
                    return True

                token = payload.get("continuationToken")
                if not token:
                    return False
                params["continuationToken"] = str(token)

        return False
