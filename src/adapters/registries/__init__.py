"""Clientes de registro (implementaciones de `core.interfaces.registry.RegistryClient`)."""

from __future__ import annotations

import httpx

from adapters.registries.flat_container import FlatContainerRegistry
from adapters.registries.nexus_search import NexusSearchRegistry
from core.config import AppSettings
from core.domain.models import RegistryKind
from core.interfaces.registry import RegistryClient


def build_registry_client(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RegistryClient:
    """Elige el cliente según `REGISTRY_KIND`."""

    if settings.registry_kind is RegistryKind.NEXUS:
        return NexusSearchRegistry(settings, transport=transport)
    return FlatContainerRegistry(settings, transport=transport)


__all__ = [
    "FlatContainerRegistry",
    "NexusSearchRegistry",
    "build_registry_client",
]
