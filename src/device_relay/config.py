"""Configuration for the relay server.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

`PORT` is read without a prefix so the server works on hosts that inject it.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelaySettings(BaseSettings):
    """Settings for the relay API.

    Environment variables:
    - PORT                (optional, default 3000)
    - RELAY_HOST          (optional, default 0.0.0.0)
    - LOG_LEVEL           (optional)
    - RELAY_CORS_ORIGINS  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `RelaySettings(_env_file=path_to_env)`.
    """

    port: int = Field(
        default=3000,
        validation_alias="PORT",
        description="TCP port the HTTP server listens on",
        ge=1,
        le=65535,
    )
    host: str = Field(
        default="0.0.0.0",
        validation_alias="RELAY_HOST",
        description="Interface to bind; all interfaces by default",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    cors_origins: str = Field(
        default="*",
        validation_alias="RELAY_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
