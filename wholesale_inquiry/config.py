"""
Centralized configuration using Pydantic Settings.

All environment variables are loaded and validated here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Resend
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True  # False for colored dev output


# Global settings instance
settings = Settings()
