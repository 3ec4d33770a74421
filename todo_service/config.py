"""
Configuration module for the todo service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_PATH = Path(__file__).resolve().parent
DATA_PATH = PACKAGE_PATH / "data"


class Settings(BaseSettings):
    """
    Application settings for the todo service.

    All settings can be configured via environment variables.
    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        APP_NAME: Display name for the application
        DEBUG: Enable debug mode (shows API docs)
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render log lines as JSON instead of console output
        USER_DATA_FILE: JSON file holding the user records
        TODO_DATA_FILE: JSON file holding the todo records
        CLIENT_DIRECTORY: Directory of static client files served at "/"
        ROUTE_OVERVIEW_PATH: Path of the route overview listing
        SLOW_REQUEST_THRESHOLD_MS: Requests slower than this are logged
    """

    APP_NAME: str = Field(
        default="Todo Lab Server",
        description="Display name for the application",
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    PORT: int = Field(
        default=4567,
        ge=1,
        le=65535,
        description="Server port number",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Render logs as JSON lines",
    )

    # Data sources
    USER_DATA_FILE: Path = Field(
        default=DATA_PATH / "users.json",
        description="JSON file holding the user records",
    )
    TODO_DATA_FILE: Path = Field(
        default=DATA_PATH / "todos.json",
        description="JSON file holding the todo records",
    )
    CLIENT_DIRECTORY: Path = Field(
        default=PACKAGE_PATH.parent / "client",
        description="Directory of static client files",
    )

    ROUTE_OVERVIEW_PATH: str = Field(
        default="/api",
        description="Path of the route overview listing",
    )
    SLOW_REQUEST_THRESHOLD_MS: float = Field(
        default=1000.0,
        gt=0,
        description="Threshold in milliseconds for slow request warnings",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ROUTE_OVERVIEW_PATH")
    @classmethod
    def validate_overview_path(cls, value: str) -> str:
        """
        Validate that the route overview path is absolute.

        Args:
            value: The path to validate

        Returns:
            The validated path without trailing slash

        Raises:
            ValueError: If the path does not start with a slash
        """
        if not value.startswith("/"):
            raise ValueError(f"Route overview path must start with '/', got: {value}")

        return value.rstrip("/") or "/"


# Global settings instance
settings = Settings()
