"""
FileStore Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment variables (case-insensitive):
    STORAGE_ROOT     Directory served by the local backend
    STORAGE_BACKEND  "local" (default) or "memory"
    CORS_ORIGINS     Comma-separated list of allowed origins
    BACKEND_HOST     Bind address used in startup log lines
    BACKEND_PORT     Bind port used in startup log lines
    LOG_LEVEL        DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

STORAGE_BACKENDS = {"local", "memory"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    """

    # ── File Storage ──────────────────────────────────────────────────────
    # What: Root directory holding the flat files, relative to backend CWD
    storage_root: str = Field(default="./storage/app")

    # What: Which StorageBackend implementation get_storage() builds
    # "memory" keeps files in process memory and loses them on restart
    storage_backend: str = Field(default="local")

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """Ensures the backend name is one we know how to build."""
        lower = v.strip().lower()
        if lower not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid storage_backend '{v}'. Must be one of: {sorted(STORAGE_BACKENDS)}"
            )
        return lower

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (parsed by the property below)
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # STORAGE_ROOT and storage_root both work
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
