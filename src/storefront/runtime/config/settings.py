"""Deployment values read from the process environment and .env files."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment and deployment
    app_environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    config_file: str = Field(default="config.yaml", validation_alias="CONFIG_FILE")

    # Persistent volume (Railway mounts one and exports its path)
    railway_volume_mount_path: str | None = Field(
        default=None, validation_alias="RAILWAY_VOLUME_MOUNT_PATH"
    )
    data_dir: str | None = Field(default=None, validation_alias="DATA_DIR")

    @property
    def resolved_data_dir(self) -> str | None:
        """Data directory override, preferring a mounted volume."""
        return self.railway_volume_mount_path or self.data_dir
