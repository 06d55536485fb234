from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Backend API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Logging
    log_file: str | None = "logs/app_errors.log"  # Empty string disables the file log

    # Runtime error reporting
    runtime_error_endpoint_url: str | None = None
    board_id: str | None = None
    telemetry_timeout_seconds: float = 5.0

    # Failure pipeline
    promote_warnings: bool = True
    fault_smoke_test: bool = False  # GET /api/test raises ZeroDivisionError

    @field_validator("log_file", "runtime_error_endpoint_url", "board_id")
    @classmethod
    def empty_as_none(cls, v: str | None) -> str | None:
        """Treat empty environment values as unset."""
        if v is not None and not v.strip():
            return None
        return v


class DatabaseSettings(BaseSettings):
    """Storage connection string, re-read on every request that needs it."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str | None = None

    @field_validator("database_url")
    @classmethod
    def empty_as_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_database_url() -> str | None:
    return DatabaseSettings().database_url
