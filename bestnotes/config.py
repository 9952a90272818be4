"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory: ~/.bestnotes/
_data_dir = Path.home() / ".bestnotes"

StartScreen = Literal["title", "onboarding", "login"]


class Settings(BaseSettings):
    """Best Notes settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="BESTNOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Screen pushed over Title at launch (Home needs a login first)
    start_screen: StartScreen = "title"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = _data_dir / "bestnotes.log"


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()
