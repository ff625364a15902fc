"""Application configuration."""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment."""

    # Application
    app_env: str = "development"
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Calculation
    default_rate_card: str = "india"
    money_places: int = 2

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "EXPOCOST_"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
