"""
Configuration helpers for the Patrol backend.

Settings are read once from the environment so that routers/services do not
fetch os.environ directly. Tests call ``get_settings.cache_clear()`` after
changing variables with monkeypatch.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple
import os

OFFICERS_DOCUMENT = "officers"
REPORTS_DOCUMENT = "reports"
UNITS_DOCUMENT = "units"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    storage_dir: Path
    static_dir: Path
    cors_origins: Tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _origins(value: str | None) -> Tuple[str, ...]:
        if not value:
            return ("*",)
        origins = tuple(o.strip() for o in value.split(",") if o.strip())
        return origins or ("*",)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        storage_dir=Path(os.getenv("STORAGE_DIR") or "data").expanduser(),
        static_dir=Path(os.getenv("STATIC_DIR") or "web").expanduser(),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
