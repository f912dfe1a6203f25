"""Catalog Settings — one typed view over environment variables and .env.

Invariants:
    - get_settings() is cached: one Settings instance per process
    - database_url always names an async driver (postgresql:// becomes postgresql+asyncpg://)
    - Pool sizing reaches the engine only for server databases, never for SQLite

Design Decisions:
    - pydantic-settings: type coercion and .env support without hand-parsing os.environ
    - log_format restricted to the two formats observability.setup_logging knows
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Catalog service settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    database_url: str = "postgresql+asyncpg://library:library@db:5432/library"
    database_pool_size: int = 10
    database_max_overflow: int = 5

    cors_origins: list[str] = ["http://localhost:3000"]

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_postgres_driver(cls, v: str) -> str:
        if isinstance(v, str) and v.startswith("postgresql://"):
            return "postgresql+asyncpg://" + v.removeprefix("postgresql://")
        return v

    def engine_options(self) -> dict:
        """Keyword arguments for create_async_engine."""
        if self.database_url.startswith("sqlite"):
            return {}
        return {
            "pool_size": self.database_pool_size,
            "max_overflow": self.database_max_overflow,
            "pool_recycle": 3600,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()
