"""Runtime settings for the scoring API and CLI.

Values come from environment variables or a local ``.env`` file, matched
case-insensitively (``CATALOG_PATH=./benders.json``, ``LOG_LEVEL=debug``).
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "bender-rank"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Catalog JSON export; empty means the bundled sample catalog
    catalog_path: str = ""

    # Storefront origin allowed by CORS
    frontend_url: str = "http://localhost:5000"
    api_prefix: str = "/api"

    # Result sizes
    recommended_limit: int = Field(3, ge=1, description="Top picks on the storefront")
    finder_result_limit: int = Field(3, ge=1, description="Finder shortlist length")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
