"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), one instance per process
    - Every setting has a default: the app runs against a local SQLite file out of the box

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - database_echo replaces the legacy "verbose" statement logging
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./TechGearWebShop.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    database_echo: bool = False
    database_pool_size: int = 5
    database_max_overflow: int = 10
    create_schema_on_startup: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
