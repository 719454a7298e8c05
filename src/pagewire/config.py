"""
Configuration module for pagewire.

Settings are loaded from .env files and environment variables prefixed with
``PAGEWIRE_``. The framework endpoint locations are configuration constants,
not computed at runtime.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagewire import constants


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Configuration settings for a pagewire application.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGEWIRE_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "pagewire"
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias=AliasChoices("PAGEWIRE_ENVIRONMENT", "ENVIRONMENT"),
        description="Runtime environment for the application",
    )
    LOG_LEVEL: str = "INFO"

    # HTTP server
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=8080, description="HTTP server port")
    DEBUG: bool = False

    # Page binding
    BIND_PAGES: bool = Field(
        default=True,
        validation_alias=AliasChoices("PAGEWIRE_BIND_PAGES", "BIND_JW_PAGES"),
        description="Register HTTP routes for every configured page",
    )
    PAGE_PACKAGES: list[str] = Field(
        default_factory=list,
        description="Packages scanned at startup for pages, events and components",
    )

    # Framework endpoint locations
    DATA_LOCATION: str = constants.DATA_LOCATION
    CSS_LOCATION: str = constants.CSS_LOCATION
    AJAX_SCRIPT_LOCATION: str = constants.AJAX_SCRIPT_LOCATION
    JW_SCRIPT_LOCATION: str = constants.JW_SCRIPT_LOCATION

    # Code generation
    TYPESCRIPT_OUTPUT_DIR: Path = Path("./generated")

    # Error reporting
    AJAX_ERROR_STACK_TRACES: bool | None = Field(
        default=None,
        description="Append stack traces to AJAX error dialogs; defaults to off in production",
    )

    def is_production(self) -> bool:
        return self.ENVIRONMENT is Environment.PRODUCTION

    def include_stack_traces(self) -> bool:
        if self.AJAX_ERROR_STACK_TRACES is None:
            return not self.is_production()
        return self.AJAX_ERROR_STACK_TRACES


# Create a single instance for the application to use
settings = Settings()
