"""Pytest fixtures and configuration for nupush tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Sequence

import httpx
import pytest

from core.config import AppSettings
from core.interfaces.command_runner import CommandResult

_SETTING_NAMES = (
    "PROJECT_FILE_PATH",
    "PACKAGE_NAME",
    "VERSION_REGEX",
    "VERSION_STATIC",
    "NUGET_KEY",
    "NUGET_SOURCE",
    "NUGET_PUSH_SOURCE",
    "REGISTRY_KIND",
    "NEXUS_REPOSITORY",
    "NEXUS_USERNAME",
    "NEXUS_PASSWORD",
    "INCLUDE_SYMBOLS",
    "HTTP_TIMEOUT_SECONDS",
    "COMMAND_TIMEOUT_SECONDS",
    "DOTNET_PATH",
    "PACKAGE_OUTPUT_DIR",
    "USER_AGENT",
    "GITHUB_OUTPUT",
)

CSPROJ = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
    <PackageId>Foo.Bar</PackageId>
    <Version>2.0.0</Version>
  </PropertyGroup>
</Project>
"""

VERSION_REGEX = r"^\s*<Version>(.*)<\/Version>\s*$"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate every test from the caller's environment and `.env` files."""
    for name in _SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"INPUT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    path = tmp_path / "Foo.Bar.csproj"
    path.write_text(CSPROJ, encoding="utf-8")
    return path


@pytest.fixture
def make_settings(project_file: Path) -> Callable[..., AppSettings]:
    """Factory for settings with sane defaults for the flat-container variant."""

    def _make(**overrides: Any) -> AppSettings:
        values: dict[str, Any] = {
            "project_file_path": project_file,
            "package_name": "Foo.Bar",
            "version_regex": VERSION_REGEX,
            "nuget_source": "https://api.nuget.org",
        }
        values.update(overrides)
        return AppSettings(_env_file=None, **values)

    return _make


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)


class FakeRunner:
    """CommandRunner double: records invocations, returns scripted exit codes per step."""

    def __init__(self, returncodes: dict[str, int] | None = None) -> None:
        self.returncodes = returncodes or {}
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    @property
    def steps(self) -> list[str]:
        return [step for step, _ in self.calls]

    async def run(self, args: Sequence[str], *, step: str) -> CommandResult:
        argv = tuple(args)
        self.calls.append((step, argv))
        return CommandResult(args=argv, returncode=self.returncodes.get(step, 0))


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
