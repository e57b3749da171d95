"""Contrato de los clientes de registro.

Cada adaptador (feed público flat-container, Nexus) implementa la misma
capacidad: decir si `name + version` ya está publicado.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PackageIdentity


@runtime_checkable
class RegistryClient(Protocol):
    """Contrato mínimo para una consulta de existencia.

    Reglas de diseño:
    - `check_exists` es asíncrono porque hace I/O (HTTP).
    - Un 404 del registro significa "no existe", nunca error.
    - Cualquier otro fallo se eleva como `RegistryError`.
    """

    async def check_exists(self, identity: PackageIdentity) -> bool:
        """Devuelve True si la versión exacta ya está publicada."""

        ...
