"""Ejecución de comandos externos con asyncio.

- La salida del comando va directa a la consola del proceso (stdout/stderr heredados).
- Cada comando tiene un timeout; al vencer se mata el proceso y el paso falla.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from core.domain.errors import PublishStepError
from core.interfaces.command_runner import CommandResult, CommandRunner


class SubprocessRunner(CommandRunner):
    def __init__(self, *, timeout_seconds: float | None = None) -> None:
        self._timeout = timeout_seconds

    async def run(self, args: Sequence[str], *, step: str) -> CommandResult:
        argv = tuple(args)
        try:
            process = await asyncio.create_subprocess_exec(*argv)
        except OSError as exc:
            raise PublishStepError(step, f"could not start {argv[0]!r}: {exc}") from exc

        try:
            returncode = await asyncio.wait_for(process.wait(), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise PublishStepError(step, f"timed out after {self._timeout:g}s") from exc
        finally:
            # Timeout, cancelación o Ctrl+C: el hijo no debe sobrevivir al paso.
            if process.returncode is None:
                process.kill()
                await process.wait()

        return CommandResult(args=argv, returncode=returncode)
