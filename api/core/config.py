"""
Configuration helpers for the cars backend.

Routers/services read settings through get_settings() instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


DEFAULT_DATABASE_URL = "sqlite:///./cars.db"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 1997


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    database_url: str
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip(),
        host=os.getenv("CARS_HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
        port=_int(os.getenv("CARS_PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
