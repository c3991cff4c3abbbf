"""Application configuration management."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: str = "*"
    port: int = 8080

    # Database
    database_url: str = "postgresql+psycopg2://localhost/bookish"
    store_timeout_seconds: float = 5.0

    # Seeding
    reset_db: bool = False
    seed_data_path: Path = BACKEND_DIR / "data" / "books.json"

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
