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
    allow_methods: list[str] = Field(default=["GET", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default="logs/app.log", description="Log file path, empty to disable")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """MongoDB configuration model."""

    url: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URL"
    )
    name: str = Field(default="storefront", description="Database name")
    products_collection: str = Field(
        default="products", description="Collection holding product documents"
    )
    server_selection_timeout_ms: int = Field(
        default=5000, description="How long the driver waits for a usable server"
    )
    app_name: str | None = Field(
        default=None, description="Application name reported to the server"
    )

    @computed_field
    @property
    def redacted_url(self) -> str:
        """Connection URL with any password masked, safe for logging."""
        scheme, sep, rest = self.url.partition("://")
        if not sep or "@" not in rest:
            return self.url
        credentials, _, host = rest.rpartition("@")
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:***@{host}"


class SearchConfig(BaseModel):
    """Search endpoint defaults."""

    default_limit: int = Field(
        default=5, description="Result count used when no limit is requested"
    )


class CatalogConfig(BaseModel):
    """Catalogue listing defaults."""

    page_size: int = Field(default=12, description="Default listing page size")
    featured_categories: list[str] = Field(
        default_factory=lambda: [
            "clothing",
            "furniture",
            "home",
            "stationery",
            "personal-care",
            "accessories",
        ],
        description="Categories that contribute one product each to the featured list",
    )
    featured_count: int = Field(default=6, description="Size of the featured list")
    related_count: int = Field(default=4, description="Size of the related list")


class CarbonConfig(BaseModel):
    """Carbon footprint estimates for products without a stored figure."""

    category_baselines: dict[str, int | float] = Field(
        default_factory=lambda: {
            "clothing": 10,
            "furniture": 25,
            "home": 8,
            "personal-care": 5,
            "stationery": 3,
            "accessories": 6,
        },
        description="kg CO2e per category",
    )
    default_baseline: int | float = Field(
        default=12, description="kg CO2e for categories without a baseline"
    )
    conventional_multiplier: int | float = Field(
        default=3,
        gt=0,
        description="Conventional product footprint relative to ours",
    )


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

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    search: SearchConfig = Field(
        default_factory=SearchConfig, description="Search configuration"
    )
    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Catalogue configuration"
    )
    carbon: CarbonConfig = Field(
        default_factory=CarbonConfig, description="Carbon footprint configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
