"""
Configuration helpers for the school board backend.

Routers/services read settings through get_settings() instead of touching
os.environ directly, so tests can swap the environment and clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

REPO_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    data_file: Path
    web_dir: Path
    timezone: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=_path(os.getenv("SCHOOLBOARD_DATA_FILE"), Path("schoolData.json")),
        web_dir=_path(os.getenv("SCHOOLBOARD_WEB_DIR"), REPO_ROOT / "web"),
        timezone=os.getenv("SCHOOLBOARD_TIMEZONE", "Asia/Kolkata"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
