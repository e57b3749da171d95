"""Tests for core.config.AppSettings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import RegistryKind


class TestEnvironmentLoading:
    """Settings are read from plain and `INPUT_`-prefixed variables."""

    def test_plain_names(self, monkeypatch: pytest.MonkeyPatch, project_file: Path) -> None:
        monkeypatch.setenv("PROJECT_FILE_PATH", str(project_file))
        monkeypatch.setenv("PACKAGE_NAME", "Foo.Bar")
        monkeypatch.setenv("INCLUDE_SYMBOLS", "true")
        settings = AppSettings(_env_file=None)
        assert settings.project_file_path == project_file
        assert settings.package_name == "Foo.Bar"
        assert settings.include_symbols is True

    def test_github_action_input_names(self, monkeypatch: pytest.MonkeyPatch, project_file: Path) -> None:
        monkeypatch.setenv("INPUT_PROJECT_FILE_PATH", str(project_file))
        monkeypatch.setenv("INPUT_PACKAGE_NAME", "Foo.Bar")
        monkeypatch.setenv("INPUT_NUGET_KEY", "secret")
        settings = AppSettings(_env_file=None)
        assert settings.package_name == "Foo.Bar"
        assert settings.nuget_key == "secret"

    def test_defaults(self, make_settings) -> None:
        settings = make_settings()
        assert settings.registry_kind is RegistryKind.FLAT_CONTAINER
        assert settings.nexus_repository == "nuget-hosted"
        assert settings.include_symbols is False
        assert settings.nuget_key is None

    def test_blank_inputs_mean_unset(self, monkeypatch: pytest.MonkeyPatch, project_file: Path) -> None:
        monkeypatch.setenv("INPUT_PROJECT_FILE_PATH", str(project_file))
        monkeypatch.setenv("INPUT_PACKAGE_NAME", "Foo.Bar")
        monkeypatch.setenv("INPUT_NUGET_KEY", "")
        monkeypatch.setenv("INPUT_VERSION_STATIC", "")
        monkeypatch.setenv("INPUT_INCLUDE_SYMBOLS", "")
        settings = AppSettings(_env_file=None)
        assert settings.nuget_key is None
        assert settings.version_static is None
        assert settings.include_symbols is False

    def test_missing_required_values(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)


class TestPushSource:
    def test_flat_container_pushes_to_source(self, make_settings) -> None:
        settings = make_settings(nuget_source="https://api.nuget.org/v3/index.json")
        assert settings.resolved_push_source() == "https://api.nuget.org/v3/index.json"

    def test_nexus_pushes_to_repository(self, make_settings) -> None:
        settings = make_settings(
            registry_kind=RegistryKind.NEXUS,
            nuget_source="https://nexus.example.com/",
            nexus_repository="nuget-internal",
        )
        assert settings.resolved_push_source() == "https://nexus.example.com/repository/nuget-internal/"

    def test_explicit_push_source_wins(self, make_settings) -> None:
        settings = make_settings(registry_kind=RegistryKind.NEXUS, nuget_push_source="https://push.example.com/")
        assert settings.resolved_push_source() == "https://push.example.com/"

    def test_nexus_credentials_need_both_values(self, make_settings) -> None:
        assert not make_settings(nexus_username="ci").has_nexus_credentials
        assert make_settings(nexus_username="ci", nexus_password="pw").has_nexus_credentials
