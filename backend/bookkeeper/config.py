from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_PACKAGE_DIR = Path(__file__).resolve().parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Bookkeeper"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Key-value store: "memory://" or any SQLAlchemy URL
    store_url: str = "sqlite:///data/bookkeeper.db"
    storage_key_prefix: str = "ieosuia_"

    # Demo data
    seed_demo_data: bool = True
    seed_file: str = str(_PACKAGE_DIR / "data" / "demo_seed.yaml")

    default_currency: str = "ZAR"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL statements
    log_level_store: str = "INFO"            # key-value store and record store

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
