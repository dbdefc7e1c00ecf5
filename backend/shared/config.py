"""
Centralized configuration for the NoDevBuild backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., RAZORPAY_*, SMTP_*).
Secrets are read once here and handed to the services that need them by
the dependency container.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "NoDevBuild API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (database + identity provider)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    # Direct Postgres URI, used only by run_migrations.py
    supabase_db_url: str = ""

    # Self-issued session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24

    # Razorpay
    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""
    razorpay_api_url: str = "https://api.razorpay.com/v1"
    gateway_timeout_seconds: float = 10.0
    currency: str = "INR"

    # SMTP relay
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    email_from: str = ""
    email_check_deliverability: bool = True
    send_login_notifications: bool = False

    # Frontend URLs (for email links)
    frontend_url: str = "http://localhost:5173"

    # Users allowed to manage courses and read enquiries
    admin_user_ids: list[str] = []


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
