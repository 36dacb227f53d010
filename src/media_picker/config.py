"""Configuration management for Media Picker."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Selection limits
    max_selectable: int = 9

    # Storage configuration
    media_root: str = "./media"
    state_path: str = "./data"

    # Acceptability filters (0 / None disables a filter)
    max_image_size: int = 50 * 1024 * 1024  # 50MB
    max_video_size: int = 500 * 1024 * 1024  # 500MB
    max_video_duration: Optional[float] = None  # seconds
    min_image_width: int = 0
    min_image_height: int = 0

    # Development
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def effective_log_level(self) -> str:
        """Log level to configure, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


# Global settings instance
settings = Settings()
