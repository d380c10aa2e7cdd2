"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api"

    # Frontend
    cors_origins: list[str] = ["http://localhost:5173"]

    # Development mode
    dev_mode: bool = False

    @property
    def effective_log_level(self) -> str:
        """Log level to apply; development mode always logs at DEBUG."""
        return "DEBUG" if self.dev_mode else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
