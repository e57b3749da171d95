"""Registro: feed NuGet v3 (flat container).

Implementación:
- `GET <source>/v3-flatcontainer/<id>/index.json` devuelve `{"versions": [...]}`.
- El flat container solo sirve ids en minúsculas.

Notas:
- 404 => el paquete no tiene ninguna versión publicada (no es error)
- 200 => existe si la versión aparece tal cual en `versions`
"""

from __future__ import annotations

import httpx

from adapters.http_client import build_async_client, parse_json_object
from core.config import AppSettings
from core.domain.errors import RegistryError
from core.domain.models import PackageIdentity
from core.interfaces.registry import RegistryClient


class FlatContainerRegistry(RegistryClient):
    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def index_url(self, package_name: str) -> str:
        return f"{self._settings.registry_base_url}/v3-flatcontainer/{package_name.lower()}/index.json"

    async def fetch_versions(self, package_name: str) -> list[str]:
        url = self.index_url(package_name)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise RegistryError(f"GET {url} failed: {exc}") from exc

        if response.status_code == 404:
            return []
        if response.status_code != 200:
            raise RegistryError(f"GET {url} returned HTTP {response.status_code}", status_code=response.status_code)

        payload = parse_json_object(response, what=url)
        versions = payload.get("versions")
        if versions is None:
            return []
        if not isinstance(versions, list):
            raise RegistryError(f"{url}: 'versions' is not a list", status_code=response.status_code)
        return [v for v in versions if isinstance(v, str)]

    async def check_exists(self, identity: PackageIdentity) -> bool:
        versions = await self.fetch_versions(identity.name)
        return identity.version in versions
