"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable from the environment or a .env file
    - get_settings() is cached (lru_cache), one instance per process
    - registry_administrator is never the null identity

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - Defaults work out of the box against a local PostgreSQL
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokenregistry.core.domain_types import (
    DEFAULT_REGISTRY_NAME, DEFAULT_REGISTRY_SYMBOL, is_null_identity,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://registry:registry@db:5432/registry"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    persistence_enabled: bool = True

    # Registry
    registry_administrator: str = "admin"
    registry_name: str = DEFAULT_REGISTRY_NAME
    registry_symbol: str = DEFAULT_REGISTRY_SYMBOL

    @field_validator("registry_administrator")
    @classmethod
    def reject_null_administrator(cls, v: str) -> str:
        v = v.strip()
        if not v or is_null_identity(v):
            raise ValueError("registry_administrator must be a real identity")
        return v

    # Notifications
    event_buffer_size: int = 100

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
