"""
Item Service — Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Read by the application factory and the `python -m itemservice` entry point.
       The store and the route handlers never read the environment themselves;
       they receive what they need from the factory.
When:  Loaded once at module import time.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


VALID_ENVIRONMENTS = {"development", "production", "test"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development. Attributes are
    grouped by concern.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)

    # What: Run mode of the service
    # Valid: development, production, test
    # production hides /docs, /redoc and /openapi.json
    app_env: str = Field(default="development")

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Ensures the run mode is one of the known environments."""
        lower = v.strip().lower()
        if lower not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid app_env '{v}'. Must be one of: {sorted(VALID_ENVIRONMENTS)}"
            )
        return lower

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    # ── Logging ───────────────────────────────────────────────────────────
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

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # APP_ENV and app_env both work
        "extra": "ignore",
    }


# Singleton instance — configuration is immutable after startup
settings = Settings()
