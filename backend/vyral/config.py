"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults work out-of-the-box: local SQLite file, local module catalog
      (the remote catalog is only queried when supabase_url and supabase_anon_key are set)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./vyral.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create tables on startup when no migration has been run (dev / SQLite)
    database_auto_create: bool = True

    # Ledger
    starting_xp: int = 420

    # Module catalog (Supabase REST)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_modules_table: str = "modules"
    catalog_timeout_seconds: float = 5.0
    catalog_max_retries: int = 3
    catalog_base_delay_ms: int = 250
    catalog_max_delay_ms: int = 4_000

    # API
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def remote_catalog_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
