"""
Application configuration using Pydantic Settings.

All configuration is read from environment variables (12-factor app),
with sensible defaults for local development.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Central application configuration."""

    # HTTP Client (for fetching GetCapabilities documents)
    http_timeout: int = Field(
        default=30,
        description="Timeout in seconds for outbound HTTP requests",
    )
    http_connect_timeout: float = Field(
        default=10.0,
        description="Connect timeout in seconds for outbound HTTP requests",
    )
    http_max_redirects: int = Field(
        default=10,
        description="Maximum number of redirects followed per request",
    )
    http_user_agent: str = Field(
        default="wfs-catalog/1.0",
        description="User-Agent header sent to WFS servers",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Application log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=8000, description="API bind port")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this throughout the app
settings = Settings()
