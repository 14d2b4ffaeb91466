import os
from dataclasses import dataclass
from functools import lru_cache


def _env_bool(name: str, default: bool = False) -> bool:
    v = (os.environ.get(name) or "").strip().lower()
    if not v:
        return default
    return v in ("true", "1", "yes", "on")


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "Football Manager"
    env: str = "dev"
    database_url: str = "sqlite+aiosqlite:///./football_manager.db"
    log_level: str = "INFO"
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            database_url=os.getenv("DATABASE_URL") or cls.database_url,
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            sql_echo=_env_bool("SQL_ECHO", cls.sql_echo),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
