"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

IMAGE_TYPES = ["jpeg", "jpg", "png", "gif", "webp"]


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["*"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str = Field(default="logs/app.log", description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./data/database.sqlite",
        description="Database connection URL ({data_dir} in config.yaml expands to storage.data_dir)",
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    sqlite_timeout: int = Field(default=20, description="SQLite lock timeout in seconds")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class UploadPolicyConfig(BaseModel):
    """Acceptance rules for one kind of uploaded image."""

    allowed_types: list[str] = Field(
        default_factory=lambda: list(IMAGE_TYPES),
        description="Allowed file extensions / image subtypes",
    )
    max_count: int = Field(default=10, description="Maximum files per request")
    max_size_mb: float = Field(default=5, description="Maximum size of a single file in MB")
    name_prefix: str = Field(default="product", description="Prefix for generated file names")

    @property
    def max_bytes(self) -> int:
        return int(self.max_size_mb * 1024 * 1024)


class StorageConfig(BaseModel):
    """Where uploaded files live and how they are exposed."""

    data_dir: str = Field(default="./data", description="Persistent data directory")
    upload_dir: str | None = Field(
        default=None, description="Upload directory (defaults to <data_dir>/uploads)"
    )
    public_prefix: str = Field(
        default="/uploads", description="URL prefix uploaded files are served under"
    )
    products: UploadPolicyConfig = Field(default_factory=UploadPolicyConfig)
    logo: UploadPolicyConfig = Field(
        default_factory=lambda: UploadPolicyConfig(
            allowed_types=[*IMAGE_TYPES, "svg"],
            max_count=1,
            max_size_mb=2,
            name_prefix="logo",
        )
    )

    @property
    def upload_path(self) -> Path:
        """Resolved directory uploaded files are written to."""
        if self.upload_dir:
            return Path(self.upload_dir)
        return Path(self.data_dir) / "uploads"


class JWTConfig(BaseModel):
    """Bearer token signing configuration."""

    secret: str | None = Field(
        default=None, description="Secret used to sign admin tokens"
    )
    algorithm: str = Field(default="HS256", description="Signing algorithm")
    issuer: str = Field(default="storefront-admin", description="Issuer claim")
    expires_in_seconds: int = Field(
        default=7 * 24 * 3600, description="Token lifetime in seconds (7 days)"
    )
    clock_skew: int = Field(default=60, description="Clock skew tolerance in seconds")


class AdminSeedConfig(BaseModel):
    """Admin account created on first initialisation."""

    username: str = Field(default="web", description="Seeded admin username")
    password: str | None = Field(
        default=None, description="Seeded admin password (no seeding when empty)"
    )
    role: str = Field(default="admin", description="Seeded admin role")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=5000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Upload storage configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="Token signing configuration"
    )
    admin: AdminSeedConfig = Field(
        default_factory=AdminSeedConfig, description="Admin seed configuration"
    )
