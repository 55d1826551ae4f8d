"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GIFTFALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Playfield (window client area)
    playfield_width: int = Field(default=400, gt=0)
    playfield_height: int = Field(default=600, gt=0)
    fps: int = Field(default=60, gt=0)
    resizable: bool = True
    window_title: str = "Giftfall"

    # Spawn timers
    gift_interval_ms: int = Field(default=1000, gt=0)
    obstacle_interval_ms: int = Field(default=1500, gt=0)

    # Paths
    assets_path: Path = Field(default_factory=lambda: Path(__file__).parent.parent / "assets")
    high_score_path: Path = Field(default_factory=lambda: Path.home() / ".giftfall" / "highscore.json")
    high_score_key: str = "santaHighScore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
