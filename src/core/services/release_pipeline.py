"""Orquestación de una publicación.

Flujo (máquina de estados):

    RESOLVING_VERSION -> CHECKING_EXISTENCE -> {SKIPPING | PUBLISHING} -> DONE | FAILED

El pipeline nunca termina el proceso: cualquier `PublishError` se convierte en
un `ReleaseResult` con outcome FAILED y la CLI decide el exit code. El progreso
sale por `PipelineHooks`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from core.config import AppSettings
from core.domain.errors import ConfigurationError, PublishError
from core.domain.models import (
    PackageIdentity,
    PublishOutcome,
    RegistryKind,
    ReleaseResult,
    ReleaseStage,
)
from core.interfaces.registry import RegistryClient
from core.services.version_resolver import resolve_version


class Publisher(Protocol):
    executed: list[str]

    async def publish(self, identity: PackageIdentity) -> PublishOutcome:
        ...


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, stage changes)."""

    info: Callable[[str], None] | None = None
    stage: Callable[[ReleaseStage], None] | None = None


def validate_publish_settings(settings: AppSettings) -> None:
    """Comprobaciones previas a cualquier I/O de red cuando se va a publicar."""

    if settings.registry_kind is RegistryKind.NEXUS and not settings.nuget_key:
        raise ConfigurationError("NUGET_KEY is required to publish to a Nexus repository.")


def resolve_identity(*, settings: AppSettings, hooks: PipelineHooks | None = None) -> PackageIdentity:
    hooks = hooks or PipelineHooks()
    if not settings.project_file_path.is_file():
        raise ConfigurationError(f"Project file not found: {settings.project_file_path}")

    if hooks.info:
        hooks.info(f"Project file: {settings.project_file_path}")
        if not settings.version_static:
            hooks.info(f"Extracting version using regex: {settings.version_regex}")

    version = resolve_version(
        static_version=settings.version_static,
        project_file=settings.project_file_path,
        version_regex=settings.version_regex,
    )
    identity = PackageIdentity(name=settings.package_name, version=version)
    if hooks.info:
        hooks.info(f"Package version: {identity.version}")
    return identity


async def run_release(
    *,
    settings: AppSettings,
    registry: RegistryClient,
    publisher: Publisher,
    hooks: PipelineHooks | None = None,
) -> ReleaseResult:
    hooks = hooks or PipelineHooks()
    stage = ReleaseStage.RESOLVING_VERSION
    identity: PackageIdentity | None = None

    def enter(next_stage: ReleaseStage) -> ReleaseStage:
        if hooks.stage:
            hooks.stage(next_stage)
        return next_stage

    try:
        enter(stage)
        validate_publish_settings(settings)
        identity = resolve_identity(settings=settings, hooks=hooks)

        stage = enter(ReleaseStage.CHECKING_EXISTENCE)
        exists = await registry.check_exists(identity)

        if exists:
            enter(ReleaseStage.SKIPPING)
            enter(ReleaseStage.DONE)
            return ReleaseResult(
                outcome=PublishOutcome.SKIPPED,
                stage=ReleaseStage.DONE,
                identity=identity,
                message=f"Version {identity.version} already exists. No new version was generated.",
            )

        stage = enter(ReleaseStage.PUBLISHING)
        if hooks.info:
            hooks.info(f"Generating new version: {identity.version}")
        outcome = await publisher.publish(identity)
    except PublishError as exc:
        enter(ReleaseStage.FAILED)
        return ReleaseResult(
            outcome=PublishOutcome.FAILED,
            stage=ReleaseStage.FAILED,
            failed_stage=stage,
            identity=identity,
            message=str(exc),
            error_kind=exc.kind,
            commands=list(publisher.executed),
        )

    enter(ReleaseStage.DONE)
    if outcome is PublishOutcome.PUBLISHED:
        message = f"New version {identity.version} was generated and published."
    else:
        message = f"Version {identity.version} was packed but not uploaded. No new version was published."
    return ReleaseResult(
        outcome=outcome,
        stage=ReleaseStage.DONE,
        identity=identity,
        message=message,
        commands=list(publisher.executed),
    )
