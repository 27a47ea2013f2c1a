"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from decimal import Decimal
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CSV_ENCODINGS = ["utf-8", "cp1252", "iso-8859-1", "ascii"]


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults for development. Override via
    environment variables (prefixed with ASSET_LEDGER_) or .env file.

    Examples:
        ASSET_LEDGER_SQLITE_PATH=/var/lib/asset-ledger/ledger.db
        ASSET_LEDGER_LOG_LEVEL=DEBUG
        ASSET_LEDGER_CSV_ENCODINGS='["utf-8", "cp1252"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSET_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Asset Ledger"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Database
    sqlite_path: Path = Field(
        default_factory=lambda: Path.home() / ".asset_ledger" / "ledger.db",
        description="SQLite database file path",
    )

    # Logging
    log_level: LogLevel = LogLevel.WARNING
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        validate_default=True,
        description="Log output format: 'json' for production, 'console' for development",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # CSV engine
    csv_encodings: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CSV_ENCODINGS),
        min_length=1,
        description="Text encodings tried in order when decoding an imported file",
    )
    decode_preview_bytes: int = Field(
        default=16,
        ge=0,
        description="Number of leading bytes reported in hex when decoding fails",
    )
    duplicate_amount_tolerance: Decimal = Field(
        default=Decimal("0.001"),
        gt=0,
        description="Amounts closer than this are considered equal for duplicate detection",
    )

    @field_validator("log_format", mode="after")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        """Default to JSON logging in production."""
        if v is None:
            env = info.data.get("environment")
            if env == Environment.PRODUCTION:
                return "json"
        return v or "console"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
