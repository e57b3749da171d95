"""Configuración del Core.

Responsabilidad:
- Centraliza las variables de entorno (pydantic-settings) sin contaminar la CLI.
- Acepta tanto los nombres "planos" (`PACKAGE_NAME`) como la forma que usan los
  inputs de GitHub Actions (`INPUT_PACKAGE_NAME`).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import RegistryKind


def _env(name: str) -> AliasChoices:
    return AliasChoices(name, f"INPUT_{name}")


class AppSettings(BaseSettings):
    """Configuración central de una ejecución.

    Cada campo se lee de `<NOMBRE>` o de `INPUT_<NOMBRE>` (acción de CI).
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    project_file_path: Path = Field(
        ...,
        validation_alias=_env("PROJECT_FILE_PATH"),
        description="Fichero de proyecto (.csproj/.props) que contiene la versión.",
    )
    package_name: str = Field(
        ...,
        min_length=1,
        validation_alias=_env("PACKAGE_NAME"),
        description="Identificador del paquete en el registro.",
    )
    version_regex: str | None = Field(
        default=None,
        validation_alias=_env("VERSION_REGEX"),
        description="Regex multilínea con un grupo de captura para la versión.",
    )
    version_static: str | None = Field(
        default=None,
        validation_alias=_env("VERSION_STATIC"),
        description="Versión literal; si existe no se lee el fichero de proyecto.",
    )

    nuget_key: str | None = Field(
        default=None,
        validation_alias=_env("NUGET_KEY"),
        description="API key para `dotnet nuget push`.",
    )
    nuget_source: str = Field(
        default="https://api.nuget.org",
        min_length=8,
        validation_alias=_env("NUGET_SOURCE"),
        description="URL base del registro.",
    )
    nuget_push_source: str | None = Field(
        default=None,
        validation_alias=_env("NUGET_PUSH_SOURCE"),
        description="Destino de `nuget push` si difiere de la URL derivada del registro.",
    )
    registry_kind: RegistryKind = Field(
        default=RegistryKind.FLAT_CONTAINER,
        validation_alias=_env("REGISTRY_KIND"),
        description="API usada para comprobar si la versión existe.",
    )

    nexus_repository: str = Field(
        default="nuget-hosted",
        min_length=1,
        validation_alias=_env("NEXUS_REPOSITORY"),
    )
    nexus_username: str | None = Field(default=None, validation_alias=_env("NEXUS_USERNAME"))
    nexus_password: str | None = Field(default=None, validation_alias=_env("NEXUS_PASSWORD"))

    include_symbols: bool = Field(
        default=False,
        validation_alias=_env("INCLUDE_SYMBOLS"),
        description="Genera también el paquete de símbolos (.snupkg).",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias=_env("HTTP_TIMEOUT_SECONDS"),
        description="Timeout por request al registro (segundos).",
    )
    command_timeout_seconds: float = Field(
        default=1800.0,
        gt=0,
        validation_alias=_env("COMMAND_TIMEOUT_SECONDS"),
        description="Timeout por comando externo (build/pack/push).",
    )
    dotnet_path: str = Field(
        default="dotnet",
        min_length=1,
        validation_alias=_env("DOTNET_PATH"),
    )
    package_output_dir: Path = Field(
        default=Path("."),
        validation_alias=_env("PACKAGE_OUTPUT_DIR"),
        description="Directorio donde `dotnet pack` deja los .nupkg.",
    )
    user_agent: str = Field(
        default="nupush/0.1 (+https://local)",
        min_length=1,
        validation_alias=_env("USER_AGENT"),
    )

    @field_validator(
        "version_regex",
        "version_static",
        "nuget_key",
        "nuget_push_source",
        "nexus_username",
        "nexus_password",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        # Los inputs vacíos de CI llegan como "" y significan "no definido".
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("include_symbols", mode="before")
    @classmethod
    def _blank_to_false(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return False
        return value

    @property
    def registry_base_url(self) -> str:
        return self.nuget_source.rstrip("/")

    @property
    def has_nexus_credentials(self) -> bool:
        return bool(self.nexus_username) and bool(self.nexus_password)

    def resolved_push_source(self) -> str:
        """Destino de `dotnet nuget push`.

        Reglas:
        - `NUGET_PUSH_SOURCE` manda si está definido.
        - Nexus recibe los paquetes en `<source>/repository/<repo>/`.
        - El feed público acepta el push en la propia URL base.
        """

        if self.nuget_push_source:
            return self.nuget_push_source
        if self.registry_kind is RegistryKind.NEXUS:
            return f"{self.registry_base_url}/repository/{self.nexus_repository}/"
        return self.nuget_source
