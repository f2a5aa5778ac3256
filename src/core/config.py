"""Application configuration using pydantic-settings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///movie_connection.db", alias="DATABASE_URL"
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # Movie catalog (TMDB)
    tmdb_api_token: str = Field(default="", alias="TMDB_API_TOKEN")
    tmdb_base_url: str = Field(
        default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL"
    )
    tmdb_timeout_seconds: float = Field(default=10.0, alias="TMDB_TIMEOUT_SECONDS")

    # Search box shows only the best few matches
    search_result_limit: int = Field(default=5, alias="SEARCH_RESULT_LIMIT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


# Global settings instance
settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Root logging setup. Call once from the process entrypoint."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
