"""
Configuration helpers for the Imoveis backend.

Routers/services read settings through get_settings() instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_DATA_DIR = PACKAGE_DIR / "data"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    storage_backend: str
    database_url: str
    cors_origins: tuple[str, ...]
    log_level: str
    log_format: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    backend = (os.getenv("STORAGE_BACKEND") or "json").strip().lower()
    if backend not in {"json", "sql"}:
        backend = "json"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=Path(os.getenv("DATA_FILE") or DEFAULT_DATA_DIR / "db.json"),
        storage_backend=backend,
        database_url=os.getenv("DATABASE_URL") or f"sqlite:///{DEFAULT_DATA_DIR / 'imoveis.db'}",
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_format=(os.getenv("LOG_FORMAT") or "standard").lower(),
    )
