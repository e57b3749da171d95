"""Errores del dominio.

Todos son terminales para la ejecución: el pipeline los convierte en un
`ReleaseResult` fallido y la CLI los traduce a exit code 1.
"""

from __future__ import annotations


class PublishError(Exception):
    """Base de los errores de publicación."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ConfigurationError(PublishError):
    """Configuración incompleta o inválida (fichero de proyecto, key, regex)."""


class VersionNotFound(PublishError):
    """La regex no encontró la versión en el fichero de proyecto."""


class RegistryError(PublishError):
    """Fallo de red, status inesperado o respuesta malformada del registro."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PublishStepError(PublishError):
    """Un paso externo (build/pack/push) terminó con error."""

    def __init__(self, step: str, message: str, *, returncode: int | None = None) -> None:
        super().__init__(f"{step}: {message}")
        self.step = step
        self.returncode = returncode
