"""
Configuration settings for the detailing shop manager.
Uses Pydantic for type-safe configuration management.
"""
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Auto Detailing Shop Manager"
    app_version: str = "1.0.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Database
    database_url: str = "sqlite+aiosqlite:///./autodetail.db"
    sql_echo: bool = False

    # Sessions
    session_cookie_name: str = "autodetail_session"
    session_expire_minutes: int = 1440  # 24 hours
    session_cookie_secure: bool = False

    # Seeded login
    default_user_email: str = "Autogarage@system.com"
    default_user_password: str = "password123"

    # Billing
    default_gst: float = 18
    default_business: str = "Auto Gamma"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:5000"]

    # API
    api_prefix: str = "/api"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
