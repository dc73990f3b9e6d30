"""
Application configuration using Pydantic settings.
"""
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Catalog Configuration
    catalog_backend: Literal["memory", "remote"] = Field(
        default="memory",
        description="Where barangay and tree catalogs are read from"
    )
    catalog_load_sample_data: bool = Field(
        default=True,
        description="Preload the sample Metro Manila catalog into the memory backend"
    )
    catalog_api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the upstream catalog service (remote backend)"
    )
    catalog_api_key: str = Field(
        default="",
        description="Bearer token for the upstream catalog service"
    )
    catalog_api_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for catalog service requests"
    )

    # Retry Configuration
    max_retry_attempts: int = Field(
        default=3,
        description="Maximum number of retry attempts for catalog calls"
    )
    retry_backoff_multiplier: int = Field(
        default=1,
        description="Multiplier for exponential backoff"
    )
    retry_min_wait: int = Field(
        default=1,
        description="Minimum wait time in seconds between retries"
    )
    retry_max_wait: int = Field(
        default=10,
        description="Maximum wait time in seconds between retries"
    )

    # Recommendation Parameters
    sqm_per_tree: float = Field(
        default=15.0,
        gt=0,
        description="Square meters allotted to one planting slot when estimating capacity"
    )
    nearest_strategy: Literal["linear", "vectorized"] = Field(
        default="linear",
        description="Scan strategy used for the nearest barangay lookup"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Whether per-client rate limiting is enforced"
    )
    rate_limit_requests: int = Field(
        default=100,
        description="Maximum requests per minute per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Barangay Tree Planner",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
