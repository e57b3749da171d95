"""Modelos del dominio (Pydantic v2).

Nota:
- Estos modelos describen *qué* se publica y *cómo terminó* una ejecución,
  no cómo se consulta el registro ni cómo se invoca `dotnet`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RegistryKind(str, Enum):
    """API usada para comprobar si una versión ya está publicada."""

    FLAT_CONTAINER = "flat-container"
    NEXUS = "nexus"


class PublishOutcome(str, Enum):
    """Resultado final de una ejecución."""

    SKIPPED = "skipped"
    PUBLISHED = "published"
    PACKED = "packed"
    FAILED = "failed"

    def label(self) -> str:
        """Human readable label for the run summary."""

        return {
            PublishOutcome.SKIPPED: "skipped, already existed",
            PublishOutcome.PUBLISHED: "published",
            PublishOutcome.PACKED: "packed, upload skipped",
            PublishOutcome.FAILED: "failed",
        }[self]


class ReleaseStage(str, Enum):
    RESOLVING_VERSION = "resolving_version"
    CHECKING_EXISTENCE = "checking_existence"
    SKIPPING = "skipping"
    PUBLISHING = "publishing"
    DONE = "done"
    FAILED = "failed"


class PackageIdentity(BaseModel):
    """Clave de búsqueda en el registro y de publicación.

    La versión es opaca: solo se compara por igualdad exacta de strings.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Identificador del paquete (p.ej. 'Foo.Bar').",
    )
    version: str = Field(
        ...,
        min_length=1,
        description="Versión tal cual se resolvió (p.ej. '1.2.3').",
    )

    def __str__(self) -> str:
        return f"{self.name} {self.version}"


class ReleaseResult(BaseModel):
    """Resultado inmutable de una ejecución del pipeline."""

    model_config = ConfigDict(frozen=True)

    outcome: PublishOutcome
    stage: ReleaseStage = Field(
        ...,
        description="Último estado alcanzado (DONE o FAILED).",
    )
    identity: PackageIdentity | None = Field(
        default=None,
        description="Ausente si la ejecución falló antes de resolver la versión.",
    )
    message: str = Field(default="")
    error_kind: str | None = Field(
        default=None,
        description="Marcador del error (p.ej. 'RegistryError') si outcome == failed.",
    )
    failed_stage: ReleaseStage | None = None
    commands: list[str] = Field(
        default_factory=list,
        description="Comandos externos ejecutados (con la API key enmascarada).",
    )

    @property
    def published(self) -> bool:
        return self.outcome is PublishOutcome.PUBLISHED

    @property
    def exit_code(self) -> int:
        return 1 if self.outcome is PublishOutcome.FAILED else 0
