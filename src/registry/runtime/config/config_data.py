"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class JWTConfig(BaseModel):
    """Signing and lifetime settings for the tokens issued at login."""

    secret: str = Field(
        default="dev-jwt-secret", description="Shared secret for signing tokens"
    )
    algorithm: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256", description="HMAC algorithm used to sign tokens"
    )
    access_token_expires_seconds: int = Field(
        default=24 * 3600, description="Access token lifetime (24 hours)"
    )
    refresh_token_expires_seconds: int = Field(
        default=7 * 24 * 3600, description="Refresh token lifetime (7 days)"
    )
    clock_skew: int = Field(default=60, description="Clock skew tolerance in seconds")


class SecurityConfig(BaseModel):
    """Credential storage configuration."""

    encryption_key: str = Field(
        default="dev-encryption-key",
        description="Passphrase the password cipher key is derived from",
    )
    encryption_salt: str = Field(
        default="institute-registry",
        description="Application salt for deriving the password cipher key",
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    service: str = Field(
        default="registry-api", description="Service name attached to every record"
    )
    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="File sink format")
    console_format: Literal["json", "plain"] = Field(
        default="plain", description="Console sink format"
    )
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite+aiosqlite:///./registry.db",
        description="Database connection URL (async driver)",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at a SQLite database."""
        return self.url.startswith("sqlite")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="Token signing configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
