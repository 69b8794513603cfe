"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


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


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="Database connection string",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    create_tables: bool = Field(
        default=True, description="Create missing tables at application startup"
    )

    @computed_field
    @property
    def backend(self) -> str:
        """Name of the database backend, e.g. 'sqlite' or 'postgresql'."""
        from sqlalchemy.engine import make_url

        return make_url(self.url).get_backend_name()

    @computed_field
    @property
    def is_memory(self) -> bool:
        """Whether the URL points at a private in-memory SQLite database."""
        from sqlalchemy.engine import make_url

        url = make_url(self.url)
        return self.backend == "sqlite" and url.database in (None, "", ":memory:")


class CacheConfig(BaseModel):
    """Product lookup cache configuration model."""

    ttl_seconds: float = Field(
        default=300, gt=0, description="Time-to-live of a cached product in seconds"
    )
    max_size: int = Field(
        default=1024, gt=0, description="Maximum number of cached products"
    )
    invalidate_on_write: bool = Field(
        default=False,
        description="Drop the cached product when it is updated or deleted",
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    name: str = Field(default="catalog-api", description="Service name")
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
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
    cache: CacheConfig = Field(
        default_factory=CacheConfig, description="Product cache configuration"
    )
