"""Tests for adapters.process_runner (spawns the current interpreter)."""

from __future__ import annotations

import asyncio
import sys

import pytest

from adapters.process_runner import SubprocessRunner
from core.domain.errors import PublishStepError


class TestSubprocessRunner:
    @pytest.mark.asyncio
    async def test_success_exit_code(self) -> None:
        result = await SubprocessRunner().run([sys.executable, "-c", "pass"], step="build")
        assert result.ok
        assert result.returncode == 0

    @pytest.mark.asyncio
    async def test_failure_exit_code_is_returned(self) -> None:
        result = await SubprocessRunner().run([sys.executable, "-c", "raise SystemExit(3)"], step="pack")
        assert not result.ok
        assert result.returncode == 3

    @pytest.mark.asyncio
    async def test_missing_executable(self) -> None:
        with pytest.raises(PublishStepError) as excinfo:
            await SubprocessRunner().run(["definitely-not-a-real-dotnet-binary"], step="build")
        assert excinfo.value.step == "build"

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self) -> None:
        runner = SubprocessRunner(timeout_seconds=0.2)
        with pytest.raises(PublishStepError) as excinfo:
            await runner.run([sys.executable, "-c", "import time; time.sleep(30)"], step="push")
        assert "timed out" in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_cancellation_kills_process(self, monkeypatch: pytest.MonkeyPatch) -> None:
        spawned: list[asyncio.subprocess.Process] = []
        create_subprocess_exec = asyncio.create_subprocess_exec

        async def _spawn(*args, **kwargs):
            process = await create_subprocess_exec(*args, **kwargs)
            spawned.append(process)
            return process

        monkeypatch.setattr(asyncio, "create_subprocess_exec", _spawn)
        task = asyncio.create_task(
            SubprocessRunner().run([sys.executable, "-c", "import time; time.sleep(30)"], step="push")
        )
        while not spawned:
            await asyncio.sleep(0.01)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert spawned[0].returncode is not None
