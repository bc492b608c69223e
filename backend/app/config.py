"""
Application configuration loaded from environment variables and env files.
"""
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGIN = "http://localhost:3000"


class ThrottleOptions(BaseModel):
    """Request throttling window. Declared configuration only, not enforced."""

    ttl: int = 60_000  # milliseconds
    limit: int = 120
    name: str = "default"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_url_scrapping: Optional[str] = None
    mongo_dbname_scrapping: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "info"

    # CORS
    cors_origins: Optional[str] = None
    frontend_origin: Optional[str] = None

    # Create source collection indexes on startup
    source_index_warmup: bool = True

    throttlers: list[ThrottleOptions] = [ThrottleOptions()]

    # Later files win: .env.local overrides .env
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    @field_validator("source_index_warmup", mode="before")
    @classmethod
    def parse_warmup_flag(cls, value) -> bool:
        """Only "0" and "false" (any case, surrounding blanks ignored) turn warmup off."""
        return str(value).strip().lower() not in ("0", "false")

    def allowed_origins(self) -> list[str]:
        """Comma separated CORS origins, falling back to the frontend origin."""
        raw = self.cors_origins or self.frontend_origin or DEFAULT_CORS_ORIGIN
        return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
