"""Application configuration module.

This module contains settings for the taskhub service, loaded from
environment variables with appropriate defaults. A single ``Settings``
instance is built at startup by the application factory and handed to
every component that needs it.
"""

from __future__ import annotations

import logging
import string
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here. The legacy ``PGDB_*`` variable names are accepted for
    the PostgreSQL connection.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "taskhub"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Users, tasks and short links over a relational store"

    # HTTP
    BASE_URL: str = "http://localhost:1337"  # Used for composing short URLs
    SHORT_LINK_PATH: str = "/s"  # Path segment that short codes are served under
    API_PREFIX: str = "/api"
    PORT: int = Field(default=1337, validation_alias=AliasChoices("PORT", "GOAPP_PORT"))
    DEBUG: bool = False
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    # Short code generation
    URL_CODE_LENGTH: int = Field(default=5, ge=1)
    URL_CODE_CHARS: str = string.ascii_letters + string.digits
    URL_CODE_ATTEMPTS_PER_LENGTH: int = Field(default=5, ge=1)
    URL_CODE_MAX_LENGTH_INCREASE: int = Field(default=2, ge=0)
    # When true, a failing uniqueness query is treated as "code is free"
    URL_CODE_CHECK_FAIL_OPEN: bool = False

    # PostgreSQL settings
    POSTGRES_SERVER: str = Field(
        default="localhost", validation_alias=AliasChoices("POSTGRES_SERVER", "PGDB_HOST")
    )
    POSTGRES_PORT: int = Field(
        default=5432, validation_alias=AliasChoices("POSTGRES_PORT", "PGDB_PORT")
    )
    POSTGRES_USER: str = Field(
        default="postgres", validation_alias=AliasChoices("POSTGRES_USER", "PGDB_USER")
    )
    POSTGRES_PASSWORD: str = Field(
        default="postgres", validation_alias=AliasChoices("POSTGRES_PASSWORD", "PGDB_PASS")
    )
    POSTGRES_DB: str = Field(
        default="taskhub", validation_alias=AliasChoices("POSTGRES_DB", "PGDB_NAME")
    )
    DATABASE_URL: Optional[str] = None  # Full SQLAlchemy URL, overrides the parts above

    # PostgreSQL pool settings
    POSTGRES_POOL_SIZE: int = 20
    POSTGRES_POOL_MAX_OVERFLOW: int = 10
    POSTGRES_POOL_TIMEOUT: int = 30
    POSTGRES_POOL_RECYCLE: int = 300
    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = False  # Run metadata.create_all on startup

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "app.log"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"
    LOG_JSON: bool = True
    LOG_TO_FILE: bool = True
    REQUEST_LOGGING_ENABLED: bool = True
    URL_ACCESS_LOGGING_ENABLED: bool = True

    # Validators
    @field_validator("CORS_ORIGINS")
    def validate_list_or_string(cls, v: Union[List[str], str]) -> List[str]:
        """Convert comma-separated string to list if needed."""
        if isinstance(v, str):
            if not v.strip():
                return []
            if v == "*":
                return ["*"]
            return [item.strip() for item in v.split(",")]
        return v

    @field_validator("SHORT_LINK_PATH")
    def validate_short_link_path(cls, v: str) -> str:
        """Normalize the short link path to ``/segment`` form."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("SHORT_LINK_PATH must not be empty")
        return f"/{v}"

    @field_validator("URL_CODE_CHARS")
    def validate_code_chars(cls, v: Any) -> str:
        if not v:
            return string.ascii_letters + string.digits
        return v

    # Computed fields
    @computed_field
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Construct the SQLAlchemy database URI from settings or use override."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )
