"""
adaptive-views Configuration
"""
from __future__ import annotations
from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    app_name: str = "Adaptive View Engine"
    debug: bool = True

    # View Configuration
    # Root folder that holds the Views/ tree; search paths are relative to it
    views_root: Path = Path(__file__).parent.parent
    view_extension: str = ".html"

    # Domain Configuration
    domain_header_name: str = "X-Domain-Name"
    feature_query_param: str = "feature"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
