"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el adaptador HTTP y el renderer lean config de forma consistente.

La CLI funciona sin ninguna variable definida: todos los campos tienen default.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "reqcli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "reqcli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "reqcli"
    return Path.home() / ".config" / "reqcli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class SuccessPolicy(str, Enum):
    """Qué códigos de estado cuentan como respuesta exitosa."""

    ANY_2XX = "2xx"
    EXACT_200 = "200"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="REQCLI_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None usa el default de httpx.",
    )
    user_agent: str = Field(
        default="reqcli/0.1",
        min_length=1,
        description="User-Agent enviado en la petición.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones HTTP.",
    )
    success_policy: SuccessPolicy = Field(
        default=SuccessPolicy.ANY_2XX,
        description="'2xx' acepta cualquier 2xx; '200' exige exactamente 200.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON en lugar de formato consola.",
    )
