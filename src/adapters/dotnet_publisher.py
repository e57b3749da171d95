"""Publicación con la CLI de .NET: build -> pack -> push.

Responsabilidad:
- Traducir un `PackageIdentity` ya confirmado como ausente en tres comandos
  `dotnet` secuenciales.
- Cortar en el primer paso que falle (los siguientes no se ejecutan).
- Devolver `PUBLISHED` solo cuando el push terminó bien.
"""

from __future__ import annotations

from typing import Callable, Sequence

from core.config import AppSettings
from core.domain.errors import PublishStepError
from core.domain.models import PackageIdentity, PublishOutcome
from core.interfaces.command_runner import CommandRunner

MASK = "***"


def mask_secret(args: Sequence[str]) -> str:
    """Línea de comando imprimible, con el valor de `--api-key` sustituido por `***`."""

    masked = list(args)
    for index, arg in enumerate(masked[:-1]):
        if arg == "--api-key":
            masked[index + 1] = MASK
    return " ".join(masked)


class DotnetPublisher:
    def __init__(
        self,
        settings: AppSettings,
        runner: CommandRunner,
        *,
        on_command: Callable[[str], None] | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self._settings = settings
        self._runner = runner
        self._on_command = on_command
        self._on_warning = on_warning
        self.executed: list[str] = []

    def build_command(self) -> list[str]:
        s = self._settings
        return [s.dotnet_path, "build", "-c", "Release", "--verbosity", "quiet", str(s.project_file_path)]

    def pack_command(self) -> list[str]:
        s = self._settings
        cmd = [s.dotnet_path, "pack"]
        if s.include_symbols:
            cmd += ["--include-symbols", "-p:SymbolPackageFormat=snupkg"]
        cmd += [
            "--no-build",
            "--verbosity",
            "quiet",
            "-c",
            "Release",
            str(s.project_file_path),
            "-o",
            str(s.package_output_dir),
        ]
        return cmd

    def push_command(self, api_key: str) -> list[str]:
        s = self._settings
        # `dotnet nuget push` expande el comodín; los .snupkg se suben junto al .nupkg.
        packages = (s.package_output_dir / "*.nupkg").as_posix()
        return [
            s.dotnet_path,
            "nuget",
            "push",
            packages,
            "--source",
            s.resolved_push_source(),
            "--api-key",
            api_key,
            "--skip-duplicate",
        ]

    async def _run_step(self, step: str, args: list[str]) -> None:
        line = mask_secret(args)
        self.executed.append(line)
        if self._on_command:
            self._on_command(line)
        result = await self._runner.run(args, step=step)
        if not result.ok:
            raise PublishStepError(step, f"exited with code {result.returncode}", returncode=result.returncode)

    async def publish(self, identity: PackageIdentity) -> PublishOutcome:
        await self._run_step("build", self.build_command())
        await self._run_step("pack", self.pack_command())

        api_key = self._settings.nuget_key
        if not api_key:
            if self._on_warning:
                self._on_warning(f"NUGET_KEY not provided. Skipping upload of {identity}.")
            return PublishOutcome.PACKED

        await self._run_step("push", self.push_command(api_key))
        return PublishOutcome.PUBLISHED
