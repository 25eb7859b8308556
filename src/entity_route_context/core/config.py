# entity_route_context/core/config.py
"""
Central configuration for the entity route context runtime.

Environment variables override defaults.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # Config file paths (glob patterns)
    entity_types_config_paths: list[str] = Field(
        default_factory=lambda: ["config/entity_types.yaml"]
    )

    route_name_prefix: str = Field(
        default="entity",
        description="First segment of conventional entity route names",
    )


settings = Settings()
