"""CLI de nupush (Typer).

Único punto que termina el proceso: los servicios devuelven resultados o
elevan `PublishError`, y aquí se traducen a salida Rich + exit code.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.dotnet_publisher import DotnetPublisher
from adapters.github_output import write_github_outputs
from adapters.process_runner import SubprocessRunner
from adapters.registries import build_registry_client
from cli.ui_components import (
    build_result_panel,
    print_command,
    print_error,
    print_info,
    print_warning,
)
from core.config import AppSettings
from core.domain.errors import PublishError
from core.domain.models import RegistryKind
from core.services.release_pipeline import PipelineHooks, resolve_identity, run_release

app = typer.Typer(
    no_args_is_help=True,
    help="Publish a NuGet package only when its version is not in the registry yet.",
)

_console = Console()
_err_console = Console(stderr=True)

EXIT_FAILURE = 1

ProjectFileOption = typer.Option(None, "--project-file", "-p", help="Overrides PROJECT_FILE_PATH.")
PackageNameOption = typer.Option(None, "--package-name", "-n", help="Overrides PACKAGE_NAME.")
StaticVersionOption = typer.Option(None, "--static-version", help="Overrides VERSION_STATIC.")
RegistryOption = typer.Option(None, "--registry", help="Overrides REGISTRY_KIND (flat-container|nexus).")


def load_settings(
    *,
    project_file: Path | None = None,
    package_name: str | None = None,
    static_version: str | None = None,
    registry: RegistryKind | None = None,
) -> AppSettings:
    """Lee la configuración; las opciones de la CLI pisan a las variables de entorno."""

    overrides: dict[str, Any] = {
        "project_file_path": project_file,
        "package_name": package_name,
        "version_static": static_version,
        "registry_kind": registry,
    }
    try:
        return AppSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']).upper() or 'settings'}: {err['msg']}" for err in exc.errors()
        )
        print_error(_err_console, "ConfigurationError", problems)
        raise typer.Exit(code=EXIT_FAILURE) from exc


def _hooks() -> PipelineHooks:
    return PipelineHooks(info=lambda message: print_info(_console, message))


@app.command()
def publish(
    project_file: Optional[Path] = ProjectFileOption,
    package_name: Optional[str] = PackageNameOption,
    static_version: Optional[str] = StaticVersionOption,
    registry: Optional[RegistryKind] = RegistryOption,
) -> None:
    """Build, pack and push the package unless the version already exists."""

    settings = load_settings(
        project_file=project_file,
        package_name=package_name,
        static_version=static_version,
        registry=registry,
    )
    registry_client = build_registry_client(settings)
    publisher = DotnetPublisher(
        settings,
        SubprocessRunner(timeout_seconds=settings.command_timeout_seconds),
        on_command=lambda line: print_command(_console, line),
        on_warning=lambda message: print_warning(_console, message),
    )

    result = asyncio.run(
        run_release(settings=settings, registry=registry_client, publisher=publisher, hooks=_hooks())
    )

    if result.error_kind:
        print_error(_err_console, result.error_kind, result.message)
    _console.print(build_result_panel(result))

    outputs = {"outcome": result.outcome.value, "published": "true" if result.published else "false"}
    if result.identity is not None:
        outputs = {"version": result.identity.version, **outputs}
    write_github_outputs(outputs)

    raise typer.Exit(code=result.exit_code)


@app.command()
def check(
    project_file: Optional[Path] = ProjectFileOption,
    package_name: Optional[str] = PackageNameOption,
    static_version: Optional[str] = StaticVersionOption,
    registry: Optional[RegistryKind] = RegistryOption,
) -> None:
    """Only report whether the resolved version is already published."""

    settings = load_settings(
        project_file=project_file,
        package_name=package_name,
        static_version=static_version,
        registry=registry,
    )
    registry_client = build_registry_client(settings)
    try:
        identity = resolve_identity(settings=settings, hooks=_hooks())
        exists = asyncio.run(registry_client.check_exists(identity))
    except PublishError as exc:
        print_error(_err_console, exc.kind, str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    if exists:
        _console.print(f"[cyan]Version {escape(identity.version)} already exists.[/cyan]")
    else:
        _console.print(f"[green]Version {escape(identity.version)} is not published yet.[/green]")
    write_github_outputs({"version": identity.version, "exists": "true" if exists else "false"})


@app.command(name="resolve-version")
def resolve_version_command(
    project_file: Optional[Path] = ProjectFileOption,
    package_name: Optional[str] = PackageNameOption,
    static_version: Optional[str] = StaticVersionOption,
) -> None:
    """Print the version that would be published."""

    settings = load_settings(
        project_file=project_file,
        package_name=package_name,
        static_version=static_version,
    )
    try:
        identity = resolve_identity(settings=settings)
    except PublishError as exc:
        print_error(_err_console, exc.kind, str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    typer.echo(identity.version)


def run() -> None:
    app()
