"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que escenarios y runner lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar las demos.
    - Un único contrato de configuración para CLI/escenarios.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_DEMOS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    sms_max_length: int = Field(
        default=20,
        ge=1,
        le=1_000,
        description="Longitud máxima de un SMS en la demo LSP.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner de bienvenida en la CLI.",
    )
    pause_on_exit: bool = Field(
        default=False,
        description="Esperar Enter antes de salir (comportamiento de consola clásico).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel mínimo de logs (loguru) enviados a stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
