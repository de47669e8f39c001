"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5001, validation_alias="PORT")
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

    # Base path the bookmark routes are mounted under (e.g. "/api")
    api_prefix: str = Field(default="", validation_alias="API_PREFIX")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(
        default="https://markit-frontend.onrender.com,http://localhost:5173",
        validation_alias="CORS_ORIGINS",
    )

    # Title enrichment on create
    fetch_timeout: float = Field(default=3.0, gt=0, validation_alias="FETCH_TIMEOUT")
    block_private_urls: bool = Field(default=True, validation_alias="BLOCK_PRIVATE_URLS")

    # Populate the in-memory store with example bookmarks at startup
    seed_bookmarks: bool = Field(default=True, validation_alias="SEED_BOOKMARKS")

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
