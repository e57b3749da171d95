"""Exportación de outputs para GitHub Actions.

Si `GITHUB_OUTPUT` está definido, cada clave se añade como `clave=valor` al
fichero que indica el runner (los steps siguientes lo leen como outputs).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping


def write_github_outputs(values: dict[str, str], *, env: Mapping[str, str] | None = None) -> Path | None:
    """Añade `values` al fichero de outputs; devuelve su ruta o None si no aplica."""

    env = os.environ if env is None else env
    output_path = (env.get("GITHUB_OUTPUT") or "").strip()
    if not output_path:
        return None

    path = Path(output_path)
    with path.open("a", encoding="utf-8") as file:
        for key, value in values.items():
            file.write(f"{key}={value}\n")
    return path
