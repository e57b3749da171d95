"""Contrato para ejecutar comandos externos (`dotnet build/pack/push`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class CommandRunner(Protocol):
    """Ejecuta un comando de forma bloqueante (para el pipeline) y devuelve su exit code.

    Un ejecutable inexistente o un timeout se elevan como `PublishStepError`.
    """

    async def run(self, args: Sequence[str], *, step: str) -> CommandResult:
        ...
