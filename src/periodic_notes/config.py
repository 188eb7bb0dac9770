"""Application configuration and settings management."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PLUGIN_DATA_PATH = Path(".obsidian") / "plugins" / "periodic-notes" / "data.json"


class Settings(BaseSettings):
    """Project-level settings loaded from environment variables/.env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    obsidian_vault_dir: Path = Field(Path("."), alias="OBSIDIAN_VAULT_DIR")
    timezone: str = Field("UTC", alias="TIMEZONE")
    settings_file: Optional[Path] = Field(None, alias="SETTINGS_FILE")

    log_dir: Path = Field(Path("logs"), alias="LOG_DIR")

    @property
    def settings_path(self) -> Path:
        """Location of the persisted notes configuration."""

        if self.settings_file is not None:
            return Path(self.settings_file)
        return Path(self.obsidian_vault_dir) / PLUGIN_DATA_PATH


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Return cached settings instance."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


__all__ = ["Settings", "get_settings", "reset_settings", "PLUGIN_DATA_PATH"]
