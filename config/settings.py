"""
Configuration Settings

Centralized configuration management using Pydantic and environment variables.
"""
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Sensitive values (database credentials) should be stored in .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Database settings
    database_url: str = "sqlite:///./trailblazers.sqlite"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_pool_timeout: int = 30
    database_pool_recycle: int = 3600
    database_echo: bool = False  # Set to True for SQL query logging

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "json"

    # Application settings
    environment: str = "development"
    app_version: str = "0.1.0"
    cors_origins: list[str] = ["http://localhost:5173"]


class SeedSettings(BaseSettings):
    """
    Startup data seeding options.

    Read from DATA_SEED_* environment variables. Constructed on demand rather
    than at import so that malformed values disable seeding instead of
    breaking application startup.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATA_SEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    enabled: bool = True
    refresh: bool = False
    base_path: str = "../databases"

    @field_validator("base_path")
    @classmethod
    def base_path_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("base path must not be blank")
        return value.strip()


def load_seed_settings(**overrides: Optional[object]) -> SeedSettings:
    """
    Build seed settings from the environment, applying explicit overrides.

    Overrides whose value is None are ignored so CLI flags that were not
    given fall through to the environment.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return SeedSettings(**values)


# Singleton instance
settings = Settings()
