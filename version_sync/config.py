"""Runtime configuration loading."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from ``VERSION_SYNC_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VERSION_SYNC_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    source_path: Path = Path("elm.json")
    target_path: Path = Path("package.json")
    indent: int = Field(default=2, ge=1, le=8)
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
