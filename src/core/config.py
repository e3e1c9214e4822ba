"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/Toggl API) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "togglcsv"
ENV_FILE_HEADER = "# togglcsv user config (.env)"


def get_user_config_dir() -> Path:
    """Carpeta de config por usuario: %APPDATA%, Application Support o $XDG_CONFIG_HOME.

    Ahí vive el token de Toggl para no pasarlo con `--token` en cada comando.
    """

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _assigned_key(line: str) -> str | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None
    return stripped.split("=", 1)[0].strip() or None


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Actualiza `values` en el .env del usuario.

    Las claves existentes se reescriben en su sitio (duplicados incluidos);
    comentarios y otras variables quedan tal cual. Las claves nuevas van al final.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    lines = env_path.read_text(encoding="utf-8").splitlines() if env_path.exists() else [ENV_FILE_HEADER]
    pending = {key: value for key, value in values.items() if value is not None}

    updated: list[str] = []
    for line in lines:
        key = _assigned_key(line)
        if key is None or key not in pending:
            updated.append(line)
            continue
        assignment = f"{key}={pending[key]}"
        if assignment not in updated:
            updated.append(assignment)

    written = {_assigned_key(line) for line in updated}
    updated.extend(f"{key}={value}" for key, value in sorted(pending.items()) if key not in written)

    env_path.write_text("\n".join(updated) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOGGL_CSV_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_token: str | None = Field(
        default=None,
        description="Token de la API de Toggl (si no se pasa --token).",
    )
    api_base_url: str = Field(
        default="https://api.track.toggl.com/api/v8",
        min_length=8,
        description="Base URL de la API REST de Toggl.",
    )
    request_interval_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Pausa mínima entre dos requests consecutivos (Toggl: ~1 req/s).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = default de httpx.",
    )
    user_agent: str = Field(
        default="togglcsv/1.0 (+https://github.com/andreaskoch/togglcsv)",
        min_length=1,
        description="User-Agent enviado a la API.",
    )
    created_with: str = Field(
        default="togglcsv",
        min_length=1,
        description="Valor de `created_with` para las time entries creadas.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
