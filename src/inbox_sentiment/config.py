"""
Configuration settings for the Inbox Sentiment Labeler.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Inbox Sentiment Labeler"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Classification service (OpenAI-compatible chat completions) ===
    GROQ_KEY: Optional[str] = None  # Missing key is valid: messages get UNPROCESSED
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    # === Mailbox ===
    MAILBOX_BACKEND: Literal["memory", "gmail"] = "memory"
    GMAIL_BASE_URL: str = "https://gmail.googleapis.com/gmail/v1"
    GMAIL_ACCESS_TOKEN: Optional[str] = None  # OAuth token obtained outside this service
    ACTIVE_USER_EMAIL: str = "me@example.com"  # Only used by the in-memory mailbox

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
