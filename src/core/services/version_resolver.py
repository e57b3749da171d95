"""Resolución de la versión a publicar.

Reglas:
- Una versión literal se usa tal cual (sin validar) y el fichero no se lee.
- Si no, se aplica la regex en modo multilínea al contenido del fichero y el
  primer grupo de captura es la versión.
"""

from __future__ import annotations

import re
from pathlib import Path

from core.domain.errors import ConfigurationError, VersionNotFound


def compile_version_regex(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.MULTILINE)
    except re.error as exc:
        raise ConfigurationError(f"Invalid version regex {pattern!r}: {exc}") from exc


def extract_version(content: str, pattern: re.Pattern[str]) -> str:
    """Devuelve el primer grupo de captura del primer match en `content`."""

    match = pattern.search(content)
    if match is None:
        raise VersionNotFound(f"Version not found using regex {pattern.pattern!r}.")
    if pattern.groups < 1 or match.group(1) is None:
        raise VersionNotFound(f"Regex {pattern.pattern!r} has no capture group for the version.")
    if not match.group(1):
        raise VersionNotFound(f"Regex {pattern.pattern!r} captured an empty version.")
    return match.group(1)


def resolve_version(
    *,
    static_version: str | None,
    project_file: Path,
    version_regex: str | None,
) -> str:
    if static_version:
        return static_version

    if not version_regex:
        raise ConfigurationError("Either VERSION_STATIC or VERSION_REGEX must be provided.")
    pattern = compile_version_regex(version_regex)

    if not project_file.is_file():
        raise VersionNotFound(f"Project file not found: {project_file}")
    content = project_file.read_text(encoding="utf-8-sig")
    return extract_version(content, pattern)
